import pytest

from c4studio.models.architecture_model import ArchitectureModel


def sample_payload():
    """A valid five-level model in wire (camelCase) form."""
    return {
        "schemaVersion": "0.1.0",
        "metadata": {"title": "Payments Platform", "createdAt": "2024-01-01T00:00:00Z"},
        "elements": [
            {"id": "land-1", "kind": "landscape", "name": "Enterprise"},
            {"id": "sys-1", "kind": "system", "name": "Payments", "parentId": "land-1"},
            {"id": "sys-2", "kind": "system", "name": "Ledger", "parentId": "land-1"},
            {"id": "cont-1", "kind": "container", "name": "API", "parentId": "sys-1", "technology": "FastAPI"},
            {"id": "comp-1", "kind": "component", "name": "Charge Handler", "parentId": "cont-1"},
            {
                "id": "code-1",
                "kind": "code",
                "name": "charge.py",
                "parentId": "comp-1",
                "codeRef": {"kind": "file", "ref": "payments/charge.py"},
            },
        ],
        "relationships": [
            {"id": "rel-a", "sourceId": "sys-1", "targetId": "sys-2", "type": "writes_to", "action": "Posts entries"},
        ],
        "constraints": [],
        "views": [
            {
                "id": "view-1",
                "level": "system",
                "title": "System Context",
                "layout": {
                    "algorithm": "deterministic-v1",
                    "nodes": [
                        {"elementId": "sys-1", "x": 50, "y": 50, "w": 120, "h": 80},
                        {"elementId": "sys-2", "x": 200, "y": 50, "w": 120, "h": 80},
                    ],
                    "edges": [{"relationshipId": "rel-a"}],
                },
            },
            {
                "id": "view-2",
                "level": "container",
                "title": "Container Diagram",
                "layout": {
                    "algorithm": "deterministic-v1",
                    "nodes": [{"elementId": "cont-1", "x": 50, "y": 50}],
                    "edges": [{"relationshipId": "rel-a"}],
                },
            },
        ],
    }


@pytest.fixture
def payload():
    return sample_payload()


@pytest.fixture
def model(payload):
    return ArchitectureModel.from_dict(payload)
