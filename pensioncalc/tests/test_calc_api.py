from __future__ import annotations

from flask.testing import FlaskClient


def test_projection_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/calc/projection",
        json={"currentPot": 100000, "monthlyContribution": 500, "years": 10, "annualGrowthRate": 0.05},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["finalPot"] > 100000
    assert len(body["yearByYear"]) == 10
    assert body["annualGrowthRate"] == 0.05
    assert "realYearByYear" not in body


def test_projection_endpoint_with_inflation(client: FlaskClient):
    resp = client.post(
        "/api/calc/projection",
        json={"currentPot": 10000, "years": 5, "annualGrowthRate": 0.05, "inflationRate": 0.02},
    )

    assert resp.status_code == 200
    real = resp.get_json()["realYearByYear"]
    assert len(real) == 5
    assert all(row["realPot"] < row["nominalPot"] for row in real)


def test_income_endpoint(client: FlaskClient):
    resp = client.post("/api/calc/income", json={"pensionPot": 2_000_000, "yearsUntilRetirement": 10})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["taxFreeLumpSum"] == 268275
    assert body["inflationAdjusted"]["nominalAnnualIncome"] > body["annualIncome"]


def test_drawdown_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/calc/drawdown",
        json={
            "annualSpending": 30000,
            "years": 25,
            "retirementAge": 66,
            "retirementPots": {"weak": 300000, "average": 350000, "strong": 400000},
            "otherIncome": {"statePension": 11502, "statePensionAge": 67},
        },
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert set(body["scenarios"]) == {"weak", "average", "strong"}
    assert len(body["scenarios"]["weak"]["results"]) == 26
    assert body["scenarios"]["weak"]["results"][2]["spending"] == 30000 - 11502
    assert len(body["potBands"]["bandWeak"]) == 26


def test_drawdown_endpoint_rejects_misordered_scenarios(client: FlaskClient):
    resp = client.post(
        "/api/calc/drawdown",
        json={
            "annualSpending": 30000,
            "years": 25,
            "retirementAge": 66,
            "retirementPots": {"weak": 300000, "average": 300000, "strong": 300000},
            "scenarioPercentages": {"weak": 8, "average": 5, "strong": 2},
        },
    )

    assert resp.status_code == 400
    assert resp.get_json()["error"]


def test_spending_plan_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/calc/spending-plan",
        json={
            "startingPot": 10000,
            "annualSpend": 50000,
            "retirementAge": 65,
            "lifeExpectancy": 90,
            "growthRate": 0,
        },
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["result"]["moneyLasts"] is False
    assert body["result"]["ageWhenRunsOut"] == 65
    assert body["status"]["status"] == "warning"


def test_max_spend_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/calc/max-spend",
        json={
            "startingPot": 500000,
            "retirementAge": 65,
            "lifeExpectancy": 90,
            "growthRate": 0.05,
            "inflationRate": 0.02,
        },
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["maxAnnualSpend"] > 0
    assert body["projection"]["moneyLasts"] is True


def test_overview_endpoint(client: FlaskClient):
    resp = client.post(
        "/api/calc/overview",
        json={"currentAge": 45, "retirementAge": 66, "lifeExpectancy": 88, "currentPot": 80000, "annualSpending": 20000},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["ages"][0] == 45 and body["ages"][-1] == 88
    assert body["selectedScenario"] == "average"


def test_overview_endpoint_business_rule_returns_400(client: FlaskClient):
    resp = client.post(
        "/api/calc/overview",
        json={"currentAge": 45, "retirementAge": 52, "currentPot": 80000},
    )

    assert resp.status_code == 400
    assert any("55" in message for message in resp.get_json()["error"])


def test_invalid_payload_returns_422(client: FlaskClient):
    resp = client.post("/api/calc/projection", json={"currentPot": -5, "years": 10})

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_unknown_fields_are_rejected(client: FlaskClient):
    resp = client.post("/api/calc/income", json={"pensionPot": 1000, "pot": 1000})

    assert resp.status_code == 422


def test_life_expectancy_before_retirement_returns_422(client: FlaskClient):
    resp = client.post(
        "/api/calc/max-spend",
        json={"startingPot": 1000, "retirementAge": 70, "lifeExpectancy": 65},
    )

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_growth_rate_above_bound_returns_422(client: FlaskClient):
    resp = client.post(
        "/api/calc/projection",
        json={"currentPot": 1000, "years": 5, "annualGrowthRate": 0.2},
    )

    assert resp.status_code == 422


def test_drawdown_endpoint_nets_additional_income(client: FlaskClient):
    resp = client.post(
        "/api/calc/drawdown",
        json={
            "annualSpending": 30000,
            "years": 10,
            "retirementAge": 60,
            "retirementPots": {"weak": 300000, "average": 350000, "strong": 400000},
            "otherIncome": {
                "statePension": 11502,
                "statePensionAge": 67,
                "includeAdditional": True,
                "dbPension": 8000,
                "dbPensionAge": 62,
                "rental": 40000,
            },
        },
    )

    assert resp.status_code == 200
    results = resp.get_json()["scenarios"]["average"]["results"]
    assert results[0]["spending"] == 0
    # rental alone covers the spending, so the pot is never drawn on
    assert all(row["spending"] == 0 for row in results)
    assert results[-1]["potAfter"] > 350000
