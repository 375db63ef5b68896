# // Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# // SPDX-License-Identifier: Apache-2.0
from ..errors import ConfigurationError, NetworkConfigurationError, NotFoundError, MissingConfigurationError
from ..config import DEFAULT_ASSIGN_PUBLIC_IP
from ..utils import dict_check
import botocore.exceptions
import logging

logger = logging.getLogger(__name__)

NOT_FOUND_ERROR_CODES = ("ClusterNotFoundException", "ServiceNotFoundException")

def explicit_network_configuration(subnets, security_groups, assign_public_ip=None):
    if assign_public_ip is None or len(assign_public_ip) <= 0:
        assign_public_ip = DEFAULT_ASSIGN_PUBLIC_IP
    return {
        "awsvpcConfiguration": {
            "subnets": list(subnets),
            "securityGroups": list(security_groups),
            "assignPublicIp": assign_public_ip
        }
    }

def ecs_get_service_details(client, cluster_name, service):
    try:
        response = client.describe_services(
            cluster=cluster_name,
            services=[service]
        )
    except botocore.exceptions.ClientError as error:
        if error.response.get("Error", {}).get("Code") in NOT_FOUND_ERROR_CODES:
            raise NotFoundError("Could not find service %s in cluster %s: %s"%(service, cluster_name, error)) from error
        raise NetworkConfigurationError("Unable to describe service %s in cluster %s: %s"%(service, cluster_name, error)) from error
    except botocore.exceptions.BotoCoreError as error:
        raise NetworkConfigurationError("Unable to describe service %s in cluster %s: %s"%(service, cluster_name, error)) from error
    services = response.get("services", [])
    if len(services) <= 0:
        return None
    return services[0]

# the service's networkConfiguration is reused verbatim
def service_network_configuration(client, cluster_name, service):
    logger.debug("Getting network configuration from service %s"%(service))
    svc_def = ecs_get_service_details(client, cluster_name, service)
    if svc_def is None:
        raise NotFoundError("Could not find service %s in cluster %s"%(service, cluster_name))
    network_configuration = svc_def.get("networkConfiguration")
    if not dict_check(network_configuration):
        raise MissingConfigurationError("Service %s in cluster %s does not have a network configuration"%(service, cluster_name))
    return network_configuration

def resolve_network_configuration(client, cluster_name, service=None, subnets=None, security_groups=None, assign_public_ip=None):
    explicit = dict_check(subnets) or dict_check(security_groups)
    if service and explicit:
        raise ConfigurationError("service cannot be combined with subnets or security-groups")
    if service:
        return service_network_configuration(client, cluster_name, service)
    if not dict_check(subnets) or not dict_check(security_groups):
        raise ConfigurationError("Either service, or both subnets and security-groups, must be supplied")
    return explicit_network_configuration(subnets, security_groups, assign_public_ip)
