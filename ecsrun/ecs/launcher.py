# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
from ..errors import LaunchError
import botocore.exceptions
import logging

logger = logging.getLogger(__name__)

FARGATE_LAUNCH_TYPE = "FARGATE"

def get_task_params(cluster_name, task_def_arn, network_configuration, override=None):
    task_params = {
        "taskDefinition": task_def_arn,
        "cluster": cluster_name,
        "count": 1,
        "launchType": FARGATE_LAUNCH_TYPE,
        "networkConfiguration": network_configuration
    }
    container_override = override.to_container_override() if override is not None else None
    if container_override is not None:
        task_params["overrides"] = {"containerOverrides": [container_override]}
    return task_params

def launch_task(client, cluster_name, task_def_arn, network_configuration, override=None):
    # invalid overrides fail before run_task is called
    if override is not None:
        override.validate()
    task_params = get_task_params(cluster_name, task_def_arn, network_configuration, override)

    logger.debug("Running task %s in cluster %s"%(task_def_arn, cluster_name))
    try:
        response = client.run_task(**task_params)
    except (botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as error:
        raise LaunchError(str(error)) from error

    tasks = response.get("tasks", [])
    if len(tasks) <= 0:
        failures = response.get("failures", [])
        reasons = ["%s %s"%(f.get("arn", ""), f.get("reason", "")) for f in failures]
        raise LaunchError("Unable to run task %s in cluster %s: %s"%(task_def_arn, cluster_name, "; ".join(reasons) or "no task returned"))
    task_arn = tasks[0]["taskArn"]
    logger.info("Started task %s"%(task_arn))
    return task_arn
