"""Lightweight evaluation harness for deterministic scenarios."""

from __future__ import annotations

from typing import Dict, List

from agents.trip_planner import TripPlannerAgent
from packing_app.config import PackingConfig
from evaluation.scenarios import EvaluationScenario, SCENARIOS
from tools.weather_provider import MockForecastProvider


def _names(items: List[Dict[str, object]]) -> List[str]:
    return [str(item["name"]) for item in items]


def _evaluate_expectations(expectations: Dict[str, object], plan: Dict[str, object]) -> Dict[str, bool]:
    packing = plan["packing"]
    checks: Dict[str, bool] = {}
    checks["tops_split_consistent"] = (
        packing["tops"]["short_sleeve"] + packing["tops"]["long_sleeve"] == packing["tops"]["total"]
    )
    checks["bottoms_split_consistent"] = (
        packing["bottoms"]["shorts"] + packing["bottoms"]["pants"] == packing["bottoms"]["total"]
    )
    if "max_tops" in expectations:
        checks["max_tops"] = packing["tops"]["total"] <= int(expectations["max_tops"])
    if "outerwear" in expectations:
        checks["outerwear"] = _names(packing["outerwear"]) == list(expectations["outerwear"])
    if "footwear_includes" in expectations:
        footwear = _names(packing["footwear"])
        checks["footwear_includes"] = all(name in footwear for name in expectations["footwear_includes"])
    if "accessories_include" in expectations:
        checks["accessories_include"] = all(
            name in packing["accessories"] for name in expectations["accessories_include"]
        )
    if "accessories_exclude" in expectations:
        checks["accessories_exclude"] = not any(
            name in packing["accessories"] for name in expectations["accessories_exclude"]
        )
    return checks


def run_scenario(scenario: EvaluationScenario) -> Dict[str, object]:
    provider = MockForecastProvider(readings=scenario.readings, city=scenario.destination)
    planner = TripPlannerAgent(config=PackingConfig(), provider=provider)
    response = planner.plan(
        {
            "destination": scenario.destination,
            "start_date": scenario.start_date,
            "end_date": scenario.end_date,
            "tolerance": scenario.tolerance.value,
        },
        client_id="evaluation",
        today=scenario.start_date,
    )
    if response.get("status") != "ok":
        return {"scenario": scenario.name, "passed": False, "checks": {"status": False}, "response": response}

    checks = _evaluate_expectations(scenario.expectations, response["plan"])
    return {
        "scenario": scenario.name,
        "passed": all(checks.values()),
        "checks": checks,
        "response": response,
    }


def run_evaluation_suite() -> List[Dict[str, object]]:
    return [run_scenario(scenario) for scenario in SCENARIOS]


def run_smoke_checks() -> List[str]:
    results = run_evaluation_suite()
    return [f"{result['scenario']}: {'passed' if result['passed'] else 'failed'}" for result in results]


__all__ = ["run_evaluation_suite", "run_scenario", "run_smoke_checks"]
