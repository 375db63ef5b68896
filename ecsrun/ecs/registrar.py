# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
from ..errors import RegistrationError
import botocore.exceptions
import logging

logger = logging.getLogger(__name__)

# the returned arn carries the new revision, launch with it rather than
# the family name
def register_task_definition(client, task_def):
    logger.info("Registering task definition family %s"%(task_def.get("family", "")))
    try:
        response = client.register_task_definition(**task_def)
    except (botocore.exceptions.ClientError, botocore.exceptions.BotoCoreError) as error:
        raise RegistrationError(str(error), task_definition=task_def) from error

    task_def_arn = response.get("taskDefinition", {}).get("taskDefinitionArn")
    if task_def_arn is None or len(task_def_arn) <= 0:
        raise RegistrationError("response did not include a task definition ARN", task_definition=task_def)
    logger.info("Registered task definition %s"%(task_def_arn))
    return task_def_arn
