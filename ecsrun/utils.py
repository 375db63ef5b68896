# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0

ECS_CONSOLE_TASK_URL = "https://console.aws.amazon.com/ecs/home?region=%s#/clusters/%s/tasks/%s/details"

# simple util functions
def dict_check(dict):
    if dict is None or len(dict)==0: return False
    return True

# splits a comma or newline separated input into a list
def split_list_input(value):
    if value is None: return []
    items = []
    for line in value.splitlines():
        for item in line.split(","):
            item = item.strip()
            if len(item) > 0:
                items.append(item)
    return items

# multi-line input, one token per non-empty line
def split_multiline_input(value):
    if value is None: return []
    return [line.strip() for line in value.splitlines() if len(line.strip()) > 0]

# arn:aws:ecs:region:account:task/cluster/<task id> -> <task id>
def task_id_from_arn(task_arn):
    return task_arn.split("/")[-1]

def console_task_url(region_name, cluster, task_arn):
    return ECS_CONSOLE_TASK_URL%(region_name, cluster, task_id_from_arn(task_arn))
