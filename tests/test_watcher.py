import pytest
from botocore.exceptions import ClientError, WaiterError

from ecsrun.ecs.watcher import (
    await_completion, classify_waiter_error, Retryable, Fatal, TaskOutcome, STOPPED_SUCCESS, STOPPED_FAILURE,
)
from ecsrun.errors import StartTimeoutError, StartWaitError, StopWaitError, DescribeTaskError
from conftest import CLUSTER, TASK_ARN


def not_running_yet():
    return WaiterError(name="TasksRunning", reason="Max attempts exceeded", last_response={})


def stopped_before_running():
    return WaiterError(
        name="TasksRunning",
        reason="Waiter encountered a terminal failure state: For expression \"tasks[].lastStatus\" we matched expected path: \"STOPPED\" at least once",
        last_response={},
    )


def test_classify_waiter_errors():
    assert isinstance(classify_waiter_error(not_running_yet()), Retryable)
    assert isinstance(classify_waiter_error(stopped_before_running()), Fatal)
    assert isinstance(classify_waiter_error(ClientError({"Error": {"Code": "X", "Message": "m"}}, "DescribeTasks")), Fatal)


def test_successful_run(ecs, running_waiter, stopped_waiter, clock):
    outcome = await_completion(ecs, CLUSTER, TASK_ARN, clock=clock)
    assert outcome.state == STOPPED_SUCCESS
    assert outcome.exit_code == 0
    running_waiter.wait.assert_called_once()
    stopped_waiter.wait.assert_called_once_with(cluster=CLUSTER, tasks=[TASK_ARN])
    ecs.describe_tasks.assert_called_once_with(cluster=CLUSTER, tasks=[TASK_ARN])
    assert clock.sleeps == []


def test_retries_until_running(ecs, running_waiter, stopped_waiter, clock):
    running_waiter.wait.side_effect = [not_running_yet(), not_running_yet(), None]
    await_completion(ecs, CLUSTER, TASK_ARN, retry_delay=10, clock=clock)
    assert running_waiter.wait.call_count == 3
    assert clock.sleeps == [10, 10]
    stopped_waiter.wait.assert_called_once()


def test_start_timeout_never_waits_for_stop(ecs, running_waiter, stopped_waiter, clock):
    running_waiter.wait.side_effect = not_running_yet()
    with pytest.raises(StartTimeoutError):
        await_completion(ecs, CLUSTER, TASK_ARN, start_timeout=300, retry_delay=10, clock=clock)
    assert clock.now > 300
    assert running_waiter.wait.call_count == 32
    stopped_waiter.wait.assert_not_called()
    ecs.describe_tasks.assert_not_called()


def test_non_timeout_start_error_is_not_retried(ecs, running_waiter, stopped_waiter, clock):
    running_waiter.wait.side_effect = stopped_before_running()
    with pytest.raises(StartWaitError):
        await_completion(ecs, CLUSTER, TASK_ARN, clock=clock)
    assert running_waiter.wait.call_count == 1
    assert clock.sleeps == []
    stopped_waiter.wait.assert_not_called()


def test_stop_wait_failure(ecs, stopped_waiter, clock):
    stopped_waiter.wait.side_effect = WaiterError(name="TasksStopped", reason="Max attempts exceeded", last_response={})
    with pytest.raises(StopWaitError):
        await_completion(ecs, CLUSTER, TASK_ARN, clock=clock)
    ecs.describe_tasks.assert_not_called()


def test_stop_timeout_bounds_waiter_attempts(ecs, stopped_waiter, clock):
    await_completion(ecs, CLUSTER, TASK_ARN, stop_timeout=600, clock=clock)
    stopped_waiter.wait.assert_called_once_with(cluster=CLUSTER, tasks=[TASK_ARN], WaiterConfig={"Delay": 6, "MaxAttempts": 100})


def test_non_zero_exit(ecs, clock):
    ecs.describe_tasks.return_value = {
        "tasks": [{"taskArn": TASK_ARN, "containers": [{"exitCode": 7}], "stoppedReason": "Essential container in task exited"}]
    }
    outcome = await_completion(ecs, CLUSTER, TASK_ARN, clock=clock)
    assert outcome.state == STOPPED_FAILURE
    assert outcome.exit_code == 7
    assert outcome.stopped_reason == "Essential container in task exited"


def test_describe_failure(ecs, clock):
    ecs.describe_tasks.return_value = {"tasks": [], "failures": [{"arn": TASK_ARN, "reason": "MISSING"}]}
    with pytest.raises(DescribeTaskError):
        await_completion(ecs, CLUSTER, TASK_ARN, clock=clock)


def test_missing_exit_code_is_failure():
    assert TaskOutcome(TASK_ARN, None, "CannotPullContainerError").state == STOPPED_FAILURE
