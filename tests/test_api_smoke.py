from scripts.api_smoke import run_smoke


def test_smoke_flow_passes_against_app(client):
    results = run_smoke(client, '')
    failed = [item for item in results if not item['ok']]
    assert failed == []
