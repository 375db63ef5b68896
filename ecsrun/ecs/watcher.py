# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
from ..errors import StartTimeoutError, StartWaitError, StopWaitError, DescribeTaskError
from ..config import DEFAULT_START_TIMEOUT_SECONDS, DEFAULT_START_RETRY_DELAY_SECONDS
import botocore.exceptions
import time
import logging

logger = logging.getLogger(__name__)

STOPPED_SUCCESS = "STOPPED_SUCCESS"
STOPPED_FAILURE = "STOPPED_FAILURE"

# one tasks_running waiter call polls for this long before it gives up
RUNNING_WAITER_CONFIG = {"Delay": 6, "MaxAttempts": 10}
STOPPED_WAITER_DELAY = 6


class Clock:
    def monotonic(self):
        return time.monotonic()

    def sleep(self, seconds):
        time.sleep(seconds)


class Retryable:
    def __init__(self, reason):
        self.reason = reason


class Fatal:
    def __init__(self, error):
        self.error = error


class TaskOutcome:
    """Final state of a stopped task, as read by describe_tasks."""

    def __init__(self, task_arn, exit_code, stopped_reason=None):
        self.task_arn = task_arn
        self.exit_code = exit_code
        self.stopped_reason = stopped_reason

    @property
    def state(self):
        return STOPPED_SUCCESS if self.exit_code == 0 else STOPPED_FAILURE

    @property
    def succeeded(self):
        return self.state == STOPPED_SUCCESS

    def __repr__(self):
        return "TaskOutcome(%s, exit_code=%s, stopped_reason=%r)"%(self.task_arn, self.exit_code, self.stopped_reason)


# only running out of waiter attempts means "not running yet", a terminal
# waiter state (task already STOPPED) or an API error is not retried
def classify_waiter_error(error):
    if isinstance(error, botocore.exceptions.WaiterError) and str(error.kwargs.get("reason", "")).startswith("Max attempts exceeded"):
        return Retryable(str(error))
    return Fatal(error)

def wait_for_running(client, cluster_name, task_arn):
    waiter = client.get_waiter("tasks_running")
    try:
        waiter.wait(cluster=cluster_name, tasks=[task_arn], WaiterConfig=RUNNING_WAITER_CONFIG)
    except (botocore.exceptions.WaiterError, botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as error:
        return classify_waiter_error(error)
    return None

def await_running(client, cluster_name, task_arn, start_timeout=DEFAULT_START_TIMEOUT_SECONDS,
                  retry_delay=DEFAULT_START_RETRY_DELAY_SECONDS, clock=None):
    clock = clock or Clock()
    start = clock.monotonic()
    attempt = 0
    while True:
        attempt += 1
        result = wait_for_running(client, cluster_name, task_arn)
        if result is None:
            logger.info("Task %s is running after %d attempt(s)"%(task_arn, attempt))
            return
        if isinstance(result, Fatal):
            raise StartWaitError("Task %s failed to start: %s"%(task_arn, result.error)) from result.error
        logger.debug("%s:%s Failed to get started data %s"%(cluster_name, task_arn, result.reason))
        if clock.monotonic() - start > start_timeout:
            raise StartTimeoutError("Timed out waiting for the container to start")
        clock.sleep(retry_delay)

def await_stopped(client, cluster_name, task_arn, stop_timeout=None):
    waiter = client.get_waiter("tasks_stopped")
    kwargs = {"cluster": cluster_name, "tasks": [task_arn]}
    if stop_timeout is not None:
        kwargs["WaiterConfig"] = {
            "Delay": STOPPED_WAITER_DELAY,
            "MaxAttempts": max(1, int(stop_timeout//STOPPED_WAITER_DELAY))
        }
    try:
        waiter.wait(**kwargs)
    except (botocore.exceptions.WaiterError, botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as error:
        raise StopWaitError("Failed waiting for task %s to stop: %s"%(task_arn, error)) from error

def describe_outcome(client, cluster_name, task_arn):
    try:
        response = client.describe_tasks(cluster=cluster_name, tasks=[task_arn])
    except (botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as error:
        raise DescribeTaskError("Unable to describe task %s: %s"%(task_arn, error)) from error
    tasks = response.get("tasks", [])
    if len(tasks) <= 0:
        raise DescribeTaskError("No task information found for task %s"%(task_arn))
    task = tasks[0]
    containers = task.get("containers", [])
    exit_code = containers[0].get("exitCode") if len(containers) > 0 else None
    return TaskOutcome(task_arn, exit_code, task.get("stoppedReason"))

def await_completion(client, cluster_name, task_arn, start_timeout=DEFAULT_START_TIMEOUT_SECONDS,
                     stop_timeout=None, retry_delay=DEFAULT_START_RETRY_DELAY_SECONDS, clock=None):
    """Block until the task has run and stopped, then read its exit code.

    Start-up is polled with repeated ``tasks_running`` waits, ``retry_delay``
    seconds apart, for at most ``start_timeout`` seconds. Stopping uses a
    single ``tasks_stopped`` wait bounded by ``stop_timeout`` seconds, or the
    waiter's own defaults when it is None.
    """
    logger.info("Waiting for task to start %s:%s"%(cluster_name, task_arn))
    await_running(client, cluster_name, task_arn, start_timeout, retry_delay, clock)
    logger.info("Waiting for task to finish %s:%s"%(cluster_name, task_arn))
    await_stopped(client, cluster_name, task_arn, stop_timeout)
    logger.debug("Checking status of task")
    return describe_outcome(client, cluster_name, task_arn)
