import os
import pytest
from unittest.mock import MagicMock

from ecsrun.step_output import StepOutput

REGION = "us-east-1"
CLUSTER = "build-cluster"
TASK_DEF_ARN = "arn:aws:ecs:us-east-1:123456789012:task-definition/migrate:7"
TASK_ARN = "arn:aws:ecs:us-east-1:123456789012:task/build-cluster/0f9a8b7c6d5e4f3a"


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def monotonic(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def aws_credentials(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def step_output(tmp_path):
    return StepOutput(output_file=str(tmp_path / "github_output"), echo=False)


@pytest.fixture
def running_waiter():
    return MagicMock(name="tasks_running")


@pytest.fixture
def stopped_waiter():
    return MagicMock(name="tasks_stopped")


@pytest.fixture
def ecs(running_waiter, stopped_waiter):
    client = MagicMock(name="ecs")
    client.meta.region_name = REGION
    waiters = {"tasks_running": running_waiter, "tasks_stopped": stopped_waiter}
    client.get_waiter.side_effect = lambda name: waiters[name]
    client.register_task_definition.return_value = {
        "taskDefinition": {"taskDefinitionArn": TASK_DEF_ARN}
    }
    client.describe_services.return_value = {
        "services": [{
            "serviceName": "web",
            "networkConfiguration": {
                "awsvpcConfiguration": {
                    "subnets": ["subnet-1"],
                    "securityGroups": ["sg-1"],
                    "assignPublicIp": "DISABLED"
                }
            }
        }],
        "failures": []
    }
    client.run_task.return_value = {"tasks": [{"taskArn": TASK_ARN}], "failures": []}
    client.describe_tasks.return_value = {
        "tasks": [{"taskArn": TASK_ARN, "containers": [{"name": "app", "exitCode": 0}], "stoppedReason": "Essential container in task exited"}]
    }
    return client
