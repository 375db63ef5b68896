# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
from ..errors import ConfigurationError
import json
import os
import yaml
import logging

logger = logging.getLogger(__name__)

# absolute paths are used as is, relative ones are joined to the workspace
def resolve_task_definition_path(task_definition_file, workspace=None):
    if os.path.isabs(task_definition_file):
        return task_definition_file
    if workspace is None or len(workspace) <= 0:
        workspace = os.environ.get("GITHUB_WORKSPACE") or os.getcwd()
    return os.path.join(workspace, task_definition_file)

# JSON files are parsed as JSON first, everything else goes through
# yaml.safe_load which also accepts JSON
def read_task_definition(task_definition_file, workspace=None):
    path = resolve_task_definition_path(task_definition_file, workspace)
    logger.info("Reading task definition from %s file"%(path))
    try:
        with open(path, "r") as input_stream:
            contents = input_stream.read()
    except OSError as error:
        raise ConfigurationError("Unable to read task definition file %s: %s"%(path, error))

    try:
        if path.lower().endswith(".json"):
            task_def = json.loads(contents)
        else:
            task_def = yaml.safe_load(contents)
    except (ValueError, yaml.YAMLError) as error:
        raise ConfigurationError("Unable to parse task definition file %s: %s"%(path, error))

    if task_def is None:
        task_def = {}
    if not isinstance(task_def, dict):
        raise ConfigurationError("Task definition file %s must hold a mapping, found %s"%(path, type(task_def).__name__))
    bad_keys = [k for k in task_def.keys() if not isinstance(k, str)]
    if len(bad_keys) > 0:
        raise ConfigurationError("Task definition file %s has non-string top-level keys: %s"%(path, ", ".join(repr(k) for k in bad_keys)))
    return task_def
