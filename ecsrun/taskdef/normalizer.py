# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
from . import taskdef_objects
from ..utils import dict_check
import logging

logger = logging.getLogger(__name__)

IGNORED_ATTRIBUTE_WARNING = ("Ignoring property '%s' in the task definition file. "
    "This property is returned by the Amazon ECS DescribeTaskDefinition API and may be shown in the ECS console, "
    "but it is not a valid field when registering a new task definition. "
    "This field can be safely removed from your task definition file.")

# None, "", and any list or dict holding nothing but empty values
def is_empty_value(value):
    if value is None:
        return True
    if isinstance(value, str):
        return len(value) == 0
    if isinstance(value, list):
        return all(is_empty_value(v) for v in value)
    if isinstance(value, dict):
        return all(is_empty_value(v) for v in value.values())
    return False

# drops empty keys and list elements at every depth, in place
def prune_empty_values(node):
    if isinstance(node, dict):
        for key in list(node.keys()):
            if is_empty_value(node[key]):
                del node[key]
            else:
                prune_empty_values(node[key])
    elif isinstance(node, list):
        node[:] = [v for v in node if not is_empty_value(v)]
        for v in node:
            prune_empty_values(v)
    return node

def remove_ignored_attributes(task_def):
    warnings = []
    for attribute in taskdef_objects.IGNORED_TASK_DEFINITION_ATTRIBUTES:
        if attribute in task_def:
            warnings.append(IGNORED_ATTRIBUTE_WARNING%(attribute))
            del task_def[attribute]
    return warnings

def has_appmesh_properties(task_def):
    proxy = task_def.get("proxyConfiguration")
    if not dict_check(proxy): return False
    if proxy.get("type") != taskdef_objects.APPMESH_PROXY_TYPE: return False
    properties = proxy.get("properties")
    return isinstance(properties, list) and len(properties) > 0

def fill_defaults(entries, defaults):
    for entry in entries:
        if not isinstance(entry, dict): continue
        for k, v in defaults.items():
            entry.setdefault(k, v)

# runs after pruning so the "" defaults survive
def maintain_valid_objects(task_def):
    if has_appmesh_properties(task_def):
        fill_defaults(task_def["proxyConfiguration"]["properties"], taskdef_objects.PROXY_PROPERTY_DEFAULTS)
    for container in task_def.get("containerDefinitions", []):
        if not isinstance(container, dict): continue
        environment = container.get("environment")
        if isinstance(environment, list):
            fill_defaults(environment, taskdef_objects.ENVIRONMENT_DEFAULTS)
    return task_def

def normalize(task_def):
    """Clean a parsed task definition so RegisterTaskDefinition accepts it.

    The document is modified in place and returned together with one warning
    per read-only attribute that was removed.
    """
    if task_def is None:
        task_def = {}
    prune_empty_values(task_def)
    warnings = remove_ignored_attributes(task_def)
    maintain_valid_objects(task_def)
    for w in warnings:
        logger.debug(w)
    return task_def, warnings
