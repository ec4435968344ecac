#!/usr/bin/env python3
import argparse
import json
import random
import string
from pathlib import Path
from typing import Any

import requests


def _rand_suffix(length: int = 8) -> str:
    return ''.join(random.choice(string.ascii_lowercase + string.digits) for _ in range(length))


def _safe_json(response: Any) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _step(results: list[dict], name: str, response: Any, expected: int) -> Any:
    ok = response.status_code == expected
    entry = {'step': name, 'status': response.status_code, 'expected': expected, 'ok': ok}
    if not ok:
        entry['error'] = (response.text or '')[:500]
    results.append(entry)
    return _safe_json(response)


def run_smoke(session: Any, base_url: str, prefix: str = '/api/v1') -> list[dict]:
    """Walk the create / list / dismiss flow with throwaway viewer ids."""

    api = f"{base_url.rstrip('/')}{prefix}/notifications"
    viewer = f"smoke-{_rand_suffix()}"
    other = f"smoke-{_rand_suffix()}"
    results: list[dict] = []

    _step(
        results,
        'create forbidden for non-admin',
        session.post(api, json={'title': 't', 'message': 'm', 'role': 'all', 'currentUserRole': 'user'}),
        403,
    )
    _step(
        results,
        'create rejects unknown role',
        session.post(api, json={'title': 't', 'message': 'm', 'role': 'owner', 'currentUserRole': 'admin'}),
        400,
    )
    created = _step(
        results,
        'create targeted notification',
        session.post(
            api,
            json={
                'title': 'Smoke test',
                'message': 'Created by the API smoke script',
                'role': 'editor',
                'userId': viewer,
                'currentUserRole': 'admin',
            },
        ),
        201,
    )
    notification_id = ((created or {}).get('notification') or {}).get('id')

    _step(results, 'list requires parameters', session.get(api, params={'userId': viewer}), 400)
    listed = _step(results, 'list as target', session.get(api, params={'userId': viewer, 'role': 'editor'}), 200)
    ids = [item.get('id') for item in (listed or {}).get('notifications', [])]
    results.append({'step': 'target sees notification', 'ok': notification_id in ids})

    hidden = _step(results, 'list as other user', session.get(api, params={'userId': other, 'role': 'editor'}), 200)
    other_ids = [item.get('id') for item in (hidden or {}).get('notifications', [])]
    results.append({'step': 'other user does not see notification', 'ok': notification_id not in other_ids})

    if notification_id is not None:
        _step(results, 'dismiss', session.post(f"{api}/{notification_id}/dismiss", json={'userId': viewer}), 200)
        again = _step(
            results,
            'dismiss again',
            session.post(f"{api}/{notification_id}/dismiss", json={'userId': viewer}),
            200,
        )
        dismissed = ((again or {}).get('notification') or {}).get('dismissed', [])
        results.append({'step': 'dismissed once', 'ok': dismissed.count(viewer) == 1})
        after = _step(results, 'list after dismiss', session.get(api, params={'userId': viewer, 'role': 'editor'}), 200)
        after_ids = [item.get('id') for item in (after or {}).get('notifications', [])]
        results.append({'step': 'dismissed notification hidden', 'ok': notification_id not in after_ids})

    _step(results, 'dismiss unknown id', session.post(f"{api}/999999999/dismiss", json={'userId': viewer}), 404)
    _step(results, 'dismiss malformed id', session.post(f"{api}/abc/dismiss", json={'userId': viewer}), 400)
    return results


def main() -> int:
    parser = argparse.ArgumentParser(description='Smoke test for the notification endpoints')
    parser.add_argument('--base-url', default='http://127.0.0.1:8000')
    parser.add_argument('--prefix', default='/api/v1')
    parser.add_argument('--output', default='reports/api_smoke.json')
    args = parser.parse_args()

    try:
        results = run_smoke(requests.Session(), args.base_url, args.prefix)
    except requests.RequestException as exc:
        print(f"Request failed: {exc}")
        return 1

    total = len(results)
    passed = len([item for item in results if item['ok']])
    failed = total - passed
    summary = {'base_url': args.base_url, 'total': total, 'passed': passed, 'failed': failed, 'results': results}

    if args.output:
        output_path = Path(args.output)
        if not output_path.is_absolute():
            output_path = Path(__file__).resolve().parents[1] / output_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(summary, ensure_ascii=False, indent=2), encoding='utf-8')

    print(f"Total: {total}, Passed: {passed}, Failed: {failed}")
    return 0 if failed == 0 else 2


if __name__ == '__main__':
    raise SystemExit(main())
