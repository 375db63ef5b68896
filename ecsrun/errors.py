# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0

# every error below ends the run, the runner reports str(error) as the
# step failure message

class EcsRunError(Exception):
    pass

# bad input combinations, raised before any ECS call
class ConfigurationError(EcsRunError):
    pass

class RegistrationError(EcsRunError):
    def __init__(self, message, task_definition=None):
        super().__init__("Failed to register task definition in ECS: %s"%(message))
        self.task_definition = task_definition

class NetworkConfigurationError(EcsRunError):
    pass

class NotFoundError(NetworkConfigurationError):
    pass

class MissingConfigurationError(NetworkConfigurationError):
    pass

class LaunchError(EcsRunError):
    pass

class StartWaitError(EcsRunError):
    pass

class StartTimeoutError(EcsRunError):
    pass

class StopWaitError(EcsRunError):
    pass

class DescribeTaskError(EcsRunError):
    pass

class NonZeroExitError(EcsRunError):
    def __init__(self, exit_code, stopped_reason):
        if stopped_reason is None or len(stopped_reason) <= 0:
            stopped_reason = "container exited with code %s"%(exit_code)
        super().__init__("non-zero exit code: %s"%(stopped_reason))
        self.exit_code = exit_code
        self.stopped_reason = stopped_reason
