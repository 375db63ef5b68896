# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0

# Attributes returned by DescribeTaskDefinition that RegisterTaskDefinition
# does not accept
IGNORED_TASK_DEFINITION_ATTRIBUTES = [
    "compatibilities",
    "taskDefinitionArn",
    "requiresAttributes",
    "revision",
    "status",
    "registeredAt",
    "deregisteredAt",
    "registeredBy"
]

APPMESH_PROXY_TYPE = "APPMESH"

PROXY_PROPERTY_DEFAULTS = {
    "name": "",
    "value": ""
}

ENVIRONMENT_DEFAULTS = {
    "value": ""
}
