from ecsrun.ecs.reporter import report, EXIT_SUCCESS, EXIT_FAILURE
from ecsrun.ecs.watcher import TaskOutcome
from ecsrun.utils import console_task_url, task_id_from_arn
from conftest import REGION, CLUSTER, TASK_ARN


def test_success_publishes_status(step_output):
    assert report(TaskOutcome(TASK_ARN, 0), step_output, REGION, CLUSTER) == EXIT_SUCCESS
    assert step_output.outputs == {"status": "success"}
    assert not step_output.failed
    with open(step_output.output_file) as of:
        assert of.read() == "status=success\n"


def test_failure_publishes_reason_and_console_link(step_output, capsys):
    step_output.echo = True
    outcome = TaskOutcome(TASK_ARN, 7, "Essential container in task exited")
    assert report(outcome, step_output, REGION, CLUSTER) == EXIT_FAILURE
    assert "status" not in step_output.outputs
    assert step_output.failures == ["non-zero exit code: Essential container in task exited"]
    out = capsys.readouterr().out
    assert "::error::non-zero exit code: Essential container in task exited" in out
    assert "https://console.aws.amazon.com/ecs/home?region=us-east-1#/clusters/build-cluster/tasks/0f9a8b7c6d5e4f3a/details" in out


def test_failure_without_stop_reason(step_output):
    report(TaskOutcome(TASK_ARN, 2), step_output, REGION, CLUSTER)
    assert step_output.failures == ["non-zero exit code: container exited with code 2"]


def test_console_url():
    assert task_id_from_arn(TASK_ARN) == "0f9a8b7c6d5e4f3a"
    url = console_task_url("eu-west-1", "prod", TASK_ARN)
    assert url == "https://console.aws.amazon.com/ecs/home?region=eu-west-1#/clusters/prod/tasks/0f9a8b7c6d5e4f3a/details"
