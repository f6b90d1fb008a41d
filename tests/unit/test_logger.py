import json
import logging

from workflow_agent.utils.logger import JsonFormatter, bind, get_logger, unbind


def test_json_formatter_merges_bound_context():
    bind(plan_id="workflow-1")
    try:
        adapter = get_logger("workflow_agent.test")
        record = adapter.logger.makeRecord(
            adapter.logger.name, logging.INFO, __file__, 1, "Generated %s", ("plan",), None,
            extra=adapter.extra,
        )
        payload = json.loads(JsonFormatter().format(record))
    finally:
        unbind("plan_id")

    assert payload["msg"] == "Generated plan"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "workflow_agent.test"
    assert payload["plan_id"] == "workflow-1"


def test_unbind_removes_context():
    bind(run="a")
    unbind("run")
    adapter = get_logger()
    assert "run" not in adapter.extra["extra"]
