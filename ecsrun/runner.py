# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
from .errors import EcsRunError, RegistrationError
from .taskdef.taskdef_reader import read_task_definition
from .taskdef.normalizer import normalize
from .ecs.registrar import register_task_definition
from .ecs.network import resolve_network_configuration
from .ecs.launcher import launch_task
from .ecs.watcher import await_completion
from .ecs.reporter import report, EXIT_SUCCESS, EXIT_FAILURE
import json
import logging

logger = logging.getLogger(__name__)

def register(client, config, step_output):
    task_def = read_task_definition(config.task_definition, config.workspace)
    task_def, warnings = normalize(task_def)
    for w in warnings:
        step_output.warning(w)
    try:
        task_def_arn = register_task_definition(client, task_def)
    except RegistrationError:
        step_output.debug("Task definition contents:")
        step_output.debug(json.dumps(task_def, indent=4, default=str))
        raise
    step_output.set_output("task-definition-arn", task_def_arn)
    return task_def_arn

def launch(client, config, task_def_arn, step_output):
    network_configuration = resolve_network_configuration(
        client,
        config.cluster,
        service=config.service,
        subnets=config.subnets,
        security_groups=config.security_groups,
        assign_public_ip=config.assign_public_ip
    )
    task_arn = launch_task(client, config.cluster, task_def_arn, network_configuration, config.override)
    step_output.set_output("task-arn", task_arn)
    return task_arn

def run(client, config, step_output, clock=None):
    """Register, launch and watch one task; returns the process exit code.

    Outputs are published as soon as they are known, so a failure later in
    the run still leaves ``task-definition-arn`` and ``task-arn`` behind.
    """
    try:
        config.validate()
        task_def_arn = register(client, config, step_output)
        task_arn = launch(client, config, task_def_arn, step_output)
        if not config.wait_for_finish:
            step_output.info("Not waiting for task %s to finish"%(task_arn))
            return EXIT_SUCCESS
        outcome = await_completion(
            client,
            config.cluster,
            task_arn,
            start_timeout=config.start_timeout,
            stop_timeout=config.stop_timeout,
            retry_delay=config.start_retry_delay,
            clock=clock
        )
    except EcsRunError as error:
        step_output.set_failed(str(error))
        return EXIT_FAILURE
    return report(outcome, step_output, client.meta.region_name, config.cluster)
