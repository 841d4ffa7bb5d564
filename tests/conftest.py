import json
from pathlib import Path

import pytest


WORKBENCH = {
    "generations": [
        {"name": "MK1", "start_year": 2007, "end_year": 2017, "description": "First generation"},
        {"name": "MK2", "start_year": 2018, "end_year": 2030},
    ],
    "commands": [
        {
            "id": "7E0.2210",
            "dbg": True,
            "filter": {"from": 2018},
            "supported": ["2018", "2019", "2020", "2023", "2024", "2025"],
            "unsupported": [],
        },
        {
            "id": "7E0.2211",
            "filter": {"from": 2015},
            "supported": [2016, 2017],
            "unsupported": [2007, 2008],
        },
        {
            "id": "7E0.2212",
            "dbgfilter": {"to": 2010, "from": 2020},
            "supported": [2011, 2012],
        },
    ],
}


@pytest.fixture
def workbench_path(tmp_path: Path) -> Path:
    path = tmp_path / "signalset.json"
    path.write_text(json.dumps(WORKBENCH), encoding="utf-8")
    return path
