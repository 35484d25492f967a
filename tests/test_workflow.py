"""
Tests for the identification workflow
워크플로우 테스트
"""

from rock_identifier import workflow
from rock_identifier.reference_data import FUN_FACTS
from rock_identifier.workflow import STEP_ORDER, create_workflow, run_workflow


def test_workflow_nodes():
    graph = create_workflow()
    for name in STEP_ORDER + ["error"]:
        assert name in graph.nodes


def test_offline_run_produces_enriched_rock():
    result = run_workflow(description="porous light volcanic foam", offline=True, task_id="task-1")

    assert result["status"] == "completed"
    assert result["task_id"] == "task-1"
    assert result["rock"]["name"] == "Pumice"
    assert result["rock"]["confidence"] == 80
    assert result["characteristics"]["texture"] == "vesicular"
    assert result["timestamp"]


def test_progress_callback_follows_step_order():
    steps = []
    run_workflow(description="dark heavy rock", offline=True, progress_callback=steps.append)
    assert steps == STEP_ORDER


def test_task_id_is_generated():
    result = run_workflow(description="soft rock", offline=True)
    assert result["task_id"]


def test_empty_description_still_completes():
    result = run_workflow(offline=True)
    assert result["status"] == "completed"
    assert result["rock"]["name"] == "Granite"
    assert result["rock"]["confidence"] == 55


def test_online_run_with_network_down_keeps_static_data():
    """네트워크 차단 → 정적 fun facts, 이미지 없음"""
    result = run_workflow(description="basalt")
    assert result["status"] == "completed"
    assert result["rock"]["funFacts"] == list(FUN_FACTS["Basalt"])
    assert "image" not in result["rock"]


def test_node_failure_routes_to_error(monkeypatch):
    def broken(characteristics):
        raise RuntimeError("classifier exploded")

    monkeypatch.setattr(workflow, "classify_rock", broken)
    steps = []

    result = run_workflow(description="basalt", offline=True, progress_callback=steps.append)

    assert result["status"] == "error"
    assert "classifier exploded" in result["error"]
    assert steps == ["extract_characteristics", "classify", "error"]
