# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
from .errors import ConfigurationError
from .utils import split_list_input, split_multiline_input
import logging

logger = logging.getLogger(__name__)

DEFAULT_ASSIGN_PUBLIC_IP = "ENABLED"
ASSIGN_PUBLIC_IP_CHOICES = ("ENABLED", "DISABLED")
DEFAULT_WAIT_FOR_MINUTES = 10
DEFAULT_START_TIMEOUT_SECONDS = 300
DEFAULT_START_RETRY_DELAY_SECONDS = 10


class ContainerOverride:
    """Replacement command and resources for one container of the task."""

    def __init__(self, container=None, command=None, cpu=None, memory=None):
        self.container = container
        self.command = command or []
        self.cpu = cpu
        self.memory = memory

    def validate(self):
        if self.container: return
        if len(self.command) > 0:
            raise ConfigurationError("override-container is required when override-container-command is set")
        if self.cpu is not None or self.memory is not None:
            raise ConfigurationError("override-container is required when override-container-cpu or override-container-memory is set")

    # containerOverrides entry for run_task, None without a target container
    def to_container_override(self):
        if not self.container:
            return None
        container_override = {"name": self.container}
        if len(self.command) > 0:
            container_override["command"] = list(self.command)
        if self.cpu is not None:
            container_override["cpu"] = self.cpu
        if self.memory is not None:
            container_override["memory"] = self.memory
        return container_override


class RunConfig:
    """Validated inputs of one run."""

    def __init__(self, cluster, task_definition, service=None, subnets=None, security_groups=None,
                 assign_public_ip=None, override=None, wait_for_finish=True,
                 wait_for_minutes=DEFAULT_WAIT_FOR_MINUTES, start_timeout=DEFAULT_START_TIMEOUT_SECONDS,
                 start_retry_delay=DEFAULT_START_RETRY_DELAY_SECONDS, workspace=None):
        self.cluster = cluster
        self.task_definition = task_definition
        self.service = service
        self.subnets = subnets or []
        self.security_groups = security_groups or []
        self.assign_public_ip = assign_public_ip
        self.override = override or ContainerOverride()
        self.wait_for_finish = wait_for_finish
        self.wait_for_minutes = wait_for_minutes
        self.start_timeout = start_timeout
        self.start_retry_delay = start_retry_delay
        self.workspace = workspace

    @classmethod
    def from_inputs(cls, cluster, task_definition, service="", subnets="", security_groups="",
                    assign_public_ip="", override_container="", override_container_command="",
                    override_container_cpu=None, override_container_memory=None, wait_for_finish=True,
                    wait_for_minutes=DEFAULT_WAIT_FOR_MINUTES, start_timeout=DEFAULT_START_TIMEOUT_SECONDS,
                    workspace=None):
        override = ContainerOverride(
            container=override_container or None,
            command=split_multiline_input(override_container_command),
            cpu=override_container_cpu,
            memory=override_container_memory
        )
        config = cls(
            cluster=cluster,
            task_definition=task_definition,
            service=service or None,
            subnets=split_list_input(subnets),
            security_groups=split_list_input(security_groups),
            assign_public_ip=(assign_public_ip or "").upper() or None,
            override=override,
            wait_for_finish=wait_for_finish,
            wait_for_minutes=wait_for_minutes,
            start_timeout=start_timeout,
            workspace=workspace
        )
        config.validate()
        return config

    @property
    def explicit_network(self):
        return len(self.subnets) > 0 or len(self.security_groups) > 0

    @property
    def stop_timeout(self):
        if self.wait_for_minutes is None: return None
        return self.wait_for_minutes*60

    def validate(self):
        if not self.cluster:
            raise ConfigurationError("Input required and not supplied: cluster")
        if not self.task_definition:
            raise ConfigurationError("Input required and not supplied: task-definition")
        if self.service and self.explicit_network:
            raise ConfigurationError("service cannot be combined with subnets or security-groups")
        if not self.service:
            if len(self.subnets) <= 0 or len(self.security_groups) <= 0:
                raise ConfigurationError("Either service, or both subnets and security-groups, must be supplied")
        if self.assign_public_ip is not None and self.assign_public_ip not in ASSIGN_PUBLIC_IP_CHOICES:
            raise ConfigurationError("assign-public-ip must be one of %s"%(", ".join(ASSIGN_PUBLIC_IP_CHOICES)))
        if self.wait_for_minutes is not None and self.wait_for_minutes <= 0:
            raise ConfigurationError("wait-for-minutes must be a positive number")
        if self.start_timeout <= 0:
            raise ConfigurationError("start-timeout-seconds must be a positive number")
        self.override.validate()
        logger.debug("Run configuration for cluster %s is valid"%(self.cluster))
        return self
