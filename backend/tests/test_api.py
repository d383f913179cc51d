"""HTTP API tests (no lifespan, no network)."""

import pytest
from fastapi.testclient import TestClient

from workbench.ai.generator import GenerationError
from workbench.main import create_app
from workbench.routers.generation import get_generator
from workbench.schemas.generation import GeneratedSolution


LED_CIRCUIT = {
    "components": [
        {"id": "led-1", "type": "led", "label": "Red LED", "state": {"kind": "led", "is_on": False}},
        {"id": "res-1", "type": "resistor", "label": "220R"},
    ],
    "wires": [
        {
            "id": "w1",
            "start": {"component_id": "led-1", "terminal_id": "anode"},
            "end": {"component_id": "res-1", "terminal_id": "t1"},
        },
        {
            "id": "w2",
            "start": {"component_id": "res-1", "terminal_id": "t2"},
            "end": {"component_id": "arduino", "terminal_id": "pin-13"},
        },
        {
            "id": "w3",
            "start": {"component_id": "led-1", "terminal_id": "cathode"},
            "end": {"component_id": "arduino", "terminal_id": "gnd-1"},
        },
    ],
}


class StubGenerator:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls = []

    async def generate(self, goal, components, wires):
        self.calls.append(goal)
        if self.error:
            raise self.error
        return GeneratedSolution(wiring="1. Done.", code="void setup() {}\nvoid loop() {}")


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json()["status"] == "ok"


class TestValidationEndpoint:
    def test_valid_circuit(self, client):
        response = client.post("/api/validation", json=LED_CIRCUIT)
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "VALID"
        assert body["violations"] == []

    def test_invalid_circuit(self, client):
        response = client.post(
            "/api/validation",
            json={"components": [{"id": "b", "type": "button", "label": "Go"}]},
        )
        body = response.json()
        assert body["status"] == "INVALID"
        assert "Go" in body["violations"][0]

    def test_bad_state_kind_rejected(self, client):
        payload = {"components": [{"id": "x", "type": "led", "state": {"kind": "bogus"}}]}
        assert client.post("/api/validation", json=payload).status_code == 422

    def test_state_kind_must_fit_type(self, client):
        payload = {
            "components": [
                {"id": "p", "type": "potentiometer", "state": {"kind": "segments"}}
            ]
        }
        assert client.post("/api/validation", json=payload).status_code == 422


class TestGenerationEndpoint:
    def test_generates_for_valid_circuit(self, app, client):
        stub = StubGenerator()
        app.dependency_overrides[get_generator] = lambda: stub
        response = client.post(
            "/api/generation", json={"goal": "blink the LED", "circuit": LED_CIRCUIT}
        )
        assert response.status_code == 200
        assert response.json()["wiring"] == "1. Done."
        assert stub.calls == ["blink the LED"]

    def test_invalid_circuit_blocks_generation(self, app, client):
        stub = StubGenerator()
        app.dependency_overrides[get_generator] = lambda: stub
        circuit = {"components": LED_CIRCUIT["components"], "wires": []}
        response = client.post(
            "/api/generation", json={"goal": "blink the LED", "circuit": circuit}
        )
        assert response.status_code == 422
        assert len(response.json()["detail"]["violations"]) == 2
        assert stub.calls == []

    def test_model_failure_is_bad_gateway(self, app, client):
        app.dependency_overrides[get_generator] = lambda: StubGenerator(
            GenerationError("LLM API error: boom")
        )
        response = client.post("/api/generation", json={"goal": "blink the LED"})
        assert response.status_code == 502


class TestCatalogEndpoint:
    def test_component_types(self, client):
        body = client.get("/api/catalog/components").json()
        led = next(item for item in body if item["type"] == "led")
        assert led["terminals"] == ["anode", "cathode"]

    def test_board_pins(self, client):
        pins = {p["id"]: p["role"] for p in client.get("/api/catalog/board").json()}
        assert pins["A0"] == "analog"
        assert pins["pin-13"] == "digital"
        assert pins["aref"] is None
