# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
import click
import boto3
import botocore.exceptions
from botocore.config import Config

from .config import RunConfig, DEFAULT_WAIT_FOR_MINUTES, DEFAULT_START_TIMEOUT_SECONDS
from .errors import ConfigurationError
from .step_output import StepOutput
from .runner import run
from .ecs.reporter import EXIT_FAILURE

import logging
import logging.config
LOGGING_CONFIG = { 
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': { 
        'standard': { 
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        },
    },
    'handlers': { 
        'default': { 
            'level': 'INFO',
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stderr',  # stdout carries workflow commands
        },
    },
    'loggers': { 
        '': {  # root logger
            'handlers': ['default'],
            'level': 'WARNING',
            'propagate': False
        }
    } 
}
logging.config.dictConfig(LOGGING_CONFIG)
logger = logging.getLogger()

# GitHub Actions passes step inputs as INPUT_<NAME> environment variables
def action_input(name):
    return "INPUT_%s"%(name.upper())

def ecs_client(region_name):
    if region_name is not None and len(region_name) > 0:
        return boto3.client("ecs", config=Config(region_name = region_name))
    return boto3.client("ecs")


# Click cli entry point function
@click.command()
@click.option("--cluster", envvar=action_input("cluster"), default="", type=str, help="Name of the ECS cluster to run the task in")
@click.option("--task-definition", "task_definition", envvar=action_input("task-definition"), default="", type=str, help="Path to the task definition file (JSON or YAML), relative to the workspace unless absolute")
@click.option("--service", envvar=action_input("service"), default="", type=str, help="Service to copy subnets and security groups from")
@click.option("--subnets", envvar=action_input("subnets"), default="", type=str, help="Comma or newline separated subnet ids, used instead of --service")
@click.option("--security-groups", "security_groups", envvar=action_input("security-groups"), default="", type=str, help="Comma or newline separated security group ids, used instead of --service")
@click.option("--assign-public-ip", "assign_public_ip", envvar=action_input("assign-public-ip"), default="", type=str, help="ENABLED or DISABLED, defaults to ENABLED with --subnets")
@click.option("--override-container", "override_container", envvar=action_input("override-container"), default="", type=str, help="Container whose command or resources are overridden")
@click.option("--override-container-command", "override_container_command", envvar=action_input("override-container-command"), default="", type=str, help="Replacement command, one token per line")
@click.option("--override-container-cpu", "override_container_cpu", envvar=action_input("override-container-cpu"), default=None, type=int, help="CPU units for the overridden container")
@click.option("--override-container-memory", "override_container_memory", envvar=action_input("override-container-memory"), default=None, type=int, help="Memory (MiB) for the overridden container")
@click.option("--wait-for-finish/--no-wait-for-finish", "wait_for_finish", envvar=action_input("wait-for-finish"), default=True, help="Wait for the task to stop before completing the step")
@click.option("--wait-for-minutes", "wait_for_minutes", envvar=action_input("wait-for-minutes"), default=DEFAULT_WAIT_FOR_MINUTES, type=int, help="Minutes to wait for the task to stop once it is running")
@click.option("--start-timeout-seconds", "start_timeout", envvar=action_input("start-timeout-seconds"), default=DEFAULT_START_TIMEOUT_SECONDS, type=int, help="Seconds to wait for the task to reach RUNNING")
@click.option("--region", envvar=action_input("region"), default="", type=str, help="Region of the ECS cluster")
@click.option("-l", "--log-level", "log_level", envvar=action_input("log-level"), default="WARNING", type=click.Choice(["DEBUG","INFO","WARNING","ERROR","CRITICAL"], case_sensitive=False), help="Select log level")
@click.pass_context
def run_task(ctx, cluster, task_definition, service, subnets, security_groups, assign_public_ip, override_container,
             override_container_command, override_container_cpu, override_container_memory, wait_for_finish,
             wait_for_minutes, start_timeout, region, log_level):
    logger.setLevel(getattr(logging,log_level.upper()))
    for handler in logger.handlers:
        handler.setLevel(getattr(logging,log_level.upper()))

    step_output = StepOutput()
    try:
        config = RunConfig.from_inputs(
            cluster=cluster,
            task_definition=task_definition,
            service=service,
            subnets=subnets,
            security_groups=security_groups,
            assign_public_ip=assign_public_ip,
            override_container=override_container,
            override_container_command=override_container_command,
            override_container_cpu=override_container_cpu,
            override_container_memory=override_container_memory,
            wait_for_finish=wait_for_finish,
            wait_for_minutes=wait_for_minutes,
            start_timeout=start_timeout
        )
    except ConfigurationError as error:
        step_output.set_failed(str(error))
        ctx.exit(EXIT_FAILURE)

    try:
        client = ecs_client(region)
    except botocore.exceptions.BotoCoreError as error:
        step_output.set_failed("Unable to create ECS client: %s"%(error))
        ctx.exit(EXIT_FAILURE)
    ctx.exit(run(client, config, step_output))
