"""
Tests for the combined report endpoint.
"""


def by_id(records):
    return sorted(records, key=lambda record: record["id"])


def test_empty_report(client):
    response = client.get("/api/reports")
    assert response.status_code == 200
    assert response.json() == {
        "inwardData": [],
        "outwardData": [],
        "returnData": [],
        "expiryData": [],
    }


def test_report_matches_individual_lists(client, payloads):
    for name, payload in payloads.items():
        client.post(f"/api/{name}", json=payload)
    client.post("/api/inward", json=dict(payloads["inward"], seedName="Maize"))
    client.post("/api/expiry", json=dict(payloads["expiry"], action="Discounted sale"))

    report = client.get("/api/reports").json()

    assert by_id(report["inwardData"]) == by_id(client.get("/api/inward").json())
    assert by_id(report["outwardData"]) == by_id(client.get("/api/outward").json())
    assert by_id(report["returnData"]) == by_id(client.get("/api/returns").json())
    assert by_id(report["expiryData"]) == by_id(client.get("/api/expiry").json())
    assert len(report["inwardData"]) == 2
    assert len(report["expiryData"]) == 2


def test_report_reflects_deletions(client, payloads):
    entry_id = client.post("/api/outward", json=payloads["outward"]).json()["id"]
    client.delete(f"/api/outward/{entry_id}")

    assert client.get("/api/reports").json()["outwardData"] == []
