"""Sample network: skills feed methodology, methodology feeds results."""

from __future__ import annotations

from netdiagram.graph import NetworkGraph

SKILLS_NETWORK = [
    {
        "id": "layer-1",
        "nodes": [
            {"id": "skill-py", "label": "Python Coding", "targets": ["proc-data", "proc-algo"]},
            {"id": "skill-ml", "label": "Machine Learning", "targets": ["proc-algo", "proc-model"]},
            {"id": "skill-strat", "label": "Strategic Planning", "targets": ["proc-ws", "proc-change"]},
        ],
    },
    {
        "id": "layer-2",
        "nodes": [
            {"id": "proc-data", "label": "Data Cleaning", "targets": ["res-eff"]},
            {"id": "proc-algo", "label": "Algorithm Design", "targets": ["res-model", "res-rev"]},
            {"id": "proc-model", "label": "Model Training", "targets": ["res-model"]},
            {"id": "proc-ws", "label": "Client Workshops", "targets": ["res-change"]},
            {"id": "proc-change", "label": "Change Mgmt", "targets": ["res-eff", "res-change"]},
        ],
    },
    {
        "id": "layer-3",
        "nodes": [
            {"id": "res-eff", "label": "20% Efficiency Gain", "targets": []},
            {"id": "res-model", "label": "Deployed Model", "targets": []},
            {"id": "res-rev", "label": "$2M Revenue Increase", "targets": []},
            {"id": "res-change", "label": "Org Transformation", "targets": []},
        ],
    },
]


def skills_network() -> NetworkGraph:
    return NetworkGraph.from_data(SKILLS_NETWORK)
