"""Tests for the HTTP API layer and narrative generator.

Covers:
  - Meta endpoints (/, /health, /schema, /inputs/defaults)
  - /project and /project/form
  - Error mapping for engine and collector rejections
  - Narrative text
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from compound_projector.api import server
from compound_projector.api.narrative import generate_narrative
from compound_projector.api.server import app
from compound_projector.config import AppSettings, ProjectionInputs
from compound_projector.engine.projection import project


client = TestClient(app)


LUMP_SUM = {
    "initial_amount": 1000,
    "annual_interest_rate_pct": 12,
    "deposit_frequency": "monthly",
    "duration_unit": "months",
    "duration": 12,
    "periodic_deposit": 0,
}


# ═══════════════════════════════════════════════════════════════════════════
# Meta endpoints
# ═══════════════════════════════════════════════════════════════════════════


class TestMetaEndpoints:

    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}

    def test_root(self):
        data = client.get("/").json()
        assert data["name"] == "Compound Interest Projector API"
        assert "start_here" in data

    def test_schema(self):
        data = client.get("/schema").json()
        assert "properties" in data
        assert "deposit_frequency" in data["properties"]

    def test_defaults_are_valid_inputs(self):
        data = client.get("/inputs/defaults").json()
        assert ProjectionInputs(**data) == ProjectionInputs()


# ═══════════════════════════════════════════════════════════════════════════
# Projection endpoints
# ═══════════════════════════════════════════════════════════════════════════


class TestProjectEndpoint:

    def test_lump_sum(self):
        resp = client.post("/project", json=LUMP_SUM)
        assert resp.status_code == 200
        data = resp.json()
        assert data["result"]["final_amount"] == pytest.approx(1126.83, abs=0.01)
        assert len(data["result"]["monthly_details"]) == 12
        assert data["summary"]["final_amount_after_tax"] == pytest.approx(
            1000 + data["result"]["total_profit"] * 0.75
        )
        assert len(data["table"]) == 12
        assert "OUTCOME" in data["narrative"]

    def test_yearly_table_is_filtered(self):
        resp = client.post("/project", json={
            "initial_amount": 0,
            "annual_interest_rate_pct": 12,
            "deposit_frequency": "yearly",
            "duration_unit": "years",
            "duration": 2,
            "periodic_deposit": 1200,
        })
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["result"]["monthly_details"]) == 24
        assert [row["label"] for row in data["table"]] == [1, 2]
        assert data["result"]["total_deposits"] == 2400

    def test_missing_fields_use_defaults(self):
        resp = client.post("/project", json={"periodic_deposit": 100})
        assert resp.status_code == 200
        assert len(resp.json()["result"]["monthly_details"]) == 120

    def test_zero_duration_is_422(self):
        resp = client.post("/project", json={**LUMP_SUM, "duration": 0})
        assert resp.status_code == 422
        detail = resp.json()["detail"]
        assert any("duration" in msg for msg in detail)

    def test_negative_deposit_is_422(self):
        resp = client.post("/project", json={**LUMP_SUM, "periodic_deposit": -1})
        assert resp.status_code == 422

    def test_bad_type_is_422(self):
        resp = client.post("/project", json={**LUMP_SUM, "deposit_frequency": "weekly"})
        assert resp.status_code == 422

    def test_yearly_deposits_over_months_is_422(self):
        resp = client.post("/project", json={
            "deposit_frequency": "yearly",
            "duration_unit": "months",
            "duration": 6,
            "periodic_deposit": 1000,
        })
        assert resp.status_code == 422
        assert any("duration_unit" in msg for msg in resp.json()["detail"])

    def test_horizon_cap(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setattr(server, "settings", AppSettings(max_total_months=24))
        ok = client.post("/project", json={**LUMP_SUM, "duration": 2, "duration_unit": "years"})
        assert ok.status_code == 200
        too_long = client.post("/project", json={**LUMP_SUM, "duration": 3, "duration_unit": "years"})
        assert too_long.status_code == 422
        assert "24-month limit" in too_long.json()["detail"][0]


class TestFormEndpoint:

    def test_form_strings(self):
        resp = client.post("/project/form", json={
            "initial_amount": "1000",
            "interest_rate": "12",
            "periodic_deposit": "0",
            "duration": "12",
            "deposit_frequency": "monthly",
            "duration_unit": "months",
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["inputs"]["annual_interest_rate_pct"] == 12
        assert data["result"]["final_amount"] == pytest.approx(1126.83, abs=0.01)

    def test_form_yearly_coerces_unit(self):
        resp = client.post("/project/form", json={
            "periodic_deposit": "1200",
            "duration": "2",
            "deposit_frequency": "yearly",
            "duration_unit": "months",
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["inputs"]["duration_unit"] == "years"
        assert len(data["result"]["monthly_details"]) == 24

    def test_form_non_numeric_is_422(self):
        resp = client.post("/project/form", json={"periodic_deposit": "abc", "duration": "5"})
        assert resp.status_code == 422
        assert any("periodic_deposit" in msg for msg in resp.json()["detail"])


# ═══════════════════════════════════════════════════════════════════════════
# Narrative
# ═══════════════════════════════════════════════════════════════════════════


class TestNarrative:

    def test_sections_present(self, monthly_saver: ProjectionInputs):
        text = generate_narrative(monthly_saver, project(monthly_saver))
        for heading in ("INPUTS", "OUTCOME", "AFTER TAX"):
            assert heading in text
        assert "per month" in text
        assert "10 years" in text
        assert "25%" in text

    def test_yearly_cadence(self, yearly_saver: ProjectionInputs):
        text = generate_narrative(yearly_saver, project(yearly_saver))
        assert "₪1,200 per year" in text

    def test_zero_rate_mentions_no_interest(self, zero_rate_saver: ProjectionInputs):
        text = generate_narrative(zero_rate_saver, project(zero_rate_saver))
        assert "No interest was earned" in text

    def test_negative_rate_warning(self):
        inputs = ProjectionInputs(
            initial_amount=1000, annual_interest_rate_pct=-5,
            deposit_frequency="monthly", duration_unit="years", duration=1,
        )
        text = generate_narrative(inputs, project(inputs))
        assert "below what was deposited" in text

    def test_currency_symbol(self, lump_sum: ProjectionInputs):
        text = generate_narrative(lump_sum, project(lump_sum), currency_symbol="$")
        assert "Final amount: $1,127" in text
