import json

from logger.logger import JSONLogger


def read_jsonl(path):
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f]


def test_log_appends_json_lines(tmp_path):
    logger = JSONLogger(str(tmp_path / "logs"), "run_")
    logger.log({"steps_taken": 1})
    logger.log({"steps_taken": 2})
    assert logger.current_log.endswith(f"run_{logger.today}.jsonl")
    assert read_jsonl(logger.current_log) == [{"steps_taken": 1}, {"steps_taken": 2}]


def test_log_run_routes_by_outcome(tmp_path):
    out = tmp_path / "logs"
    logger = JSONLogger(str(out), "run_")
    logger.log_run({"outcome": "accept", "steps_taken": 4})
    logger.log_run({"outcome": "reject", "steps_taken": 0})
    logger.log_run({"outcome": "running", "steps_taken": 10})

    assert len(read_jsonl(logger.current_log)) == 3
    assert read_jsonl(out / f"accepted_{logger.today}.jsonl") == [{"outcome": "accept", "steps_taken": 4}]
    assert read_jsonl(out / f"rejected_{logger.today}.jsonl") == [{"outcome": "reject", "steps_taken": 0}]
    assert read_jsonl(out / f"unfinished_{logger.today}.jsonl") == [{"outcome": "running", "steps_taken": 10}]


def test_rotate_keeps_prefix(tmp_path):
    logger = JSONLogger(str(tmp_path), "tm_")
    logger.rotate()
    assert logger.current_log.endswith(f"tm_{logger.today}.jsonl")
