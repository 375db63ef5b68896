# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
from ..errors import NonZeroExitError
from ..utils import console_task_url
import logging

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "success"
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# publishes the task outcome and returns the process exit code
def report(outcome, step_output, region_name, cluster_name):
    if outcome.succeeded:
        step_output.set_output("status", SUCCESS_STATUS)
        return EXIT_SUCCESS

    error = NonZeroExitError(outcome.exit_code, outcome.stopped_reason)
    step_output.set_failed(str(error))
    step_output.info("task failed, you can check the error on Amazon ECS console: %s"%(
        console_task_url(region_name, cluster_name, outcome.task_arn)))
    return EXIT_FAILURE
