"""Microsoft.Cdn operations.

Create, update, delete, start and stop are long-running on the service side;
only the first response is returned and no polling is done.
"""

from __future__ import annotations

from az_arm._operation import Operation, Response
from az_arm._pagination import Pager
from az_arm.models import Page
from az_arm.models.cdn import (
    CheckNameAvailabilityInput,
    CheckNameAvailabilityOutput,
    Endpoint,
    Profile,
    ProfileUpdateParameters,
    ResourceUsage,
)
from az_arm.services import OperationGroup

API_VERSION = "2019-12-31"

_RG_PATH = "subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}"
_PROFILE_PATH = f"{_RG_PATH}/providers/Microsoft.Cdn/profiles/{{profileName}}"
_ENDPOINT_PATH = f"{_PROFILE_PATH}/endpoints/{{endpointName}}"

PROFILES_LIST = Operation(
    "GET",
    "subscriptions/{subscriptionId}/providers/Microsoft.Cdn/profiles",
    API_VERSION,
    responses={200: Page[Profile]},
)
PROFILES_LIST_BY_RESOURCE_GROUP = Operation(
    "GET",
    f"{_RG_PATH}/providers/Microsoft.Cdn/profiles",
    API_VERSION,
    responses={200: Page[Profile]},
)
PROFILES_GET = Operation("GET", _PROFILE_PATH, API_VERSION, responses={200: Profile})
PROFILES_CREATE = Operation(
    "PUT",
    _PROFILE_PATH,
    API_VERSION,
    responses={200: Profile, 201: Profile, 202: Profile},
    body=Profile,
)
PROFILES_UPDATE = Operation(
    "PATCH",
    _PROFILE_PATH,
    API_VERSION,
    responses={200: Profile, 202: Profile},
    body=ProfileUpdateParameters,
)
PROFILES_DELETE = Operation(
    "DELETE", _PROFILE_PATH, API_VERSION, responses={200: None, 202: None, 204: None}
)
PROFILES_LIST_RESOURCE_USAGE = Operation(
    "POST",
    f"{_PROFILE_PATH}/checkResourceUsage",
    API_VERSION,
    responses={200: Page[ResourceUsage]},
)

ENDPOINTS_LIST_BY_PROFILE = Operation(
    "GET", f"{_PROFILE_PATH}/endpoints", API_VERSION, responses={200: Page[Endpoint]}
)
ENDPOINTS_GET = Operation("GET", _ENDPOINT_PATH, API_VERSION, responses={200: Endpoint})
ENDPOINTS_START = Operation(
    "POST", f"{_ENDPOINT_PATH}/start", API_VERSION, responses={200: Endpoint, 202: Endpoint}
)
ENDPOINTS_STOP = Operation(
    "POST", f"{_ENDPOINT_PATH}/stop", API_VERSION, responses={200: Endpoint, 202: Endpoint}
)

CHECK_NAME_AVAILABILITY = Operation(
    "POST",
    "providers/Microsoft.Cdn/checkNameAvailability",
    API_VERSION,
    responses={200: CheckNameAvailabilityOutput},
    body=CheckNameAvailabilityInput,
)


class ProfilesOperations(OperationGroup):
    def list(self, subscription_id: str) -> Pager[Profile]:
        return self._client.pager(PROFILES_LIST, subscriptionId=subscription_id)

    def list_by_resource_group(
        self, subscription_id: str, resource_group_name: str
    ) -> Pager[Profile]:
        return self._client.pager(
            PROFILES_LIST_BY_RESOURCE_GROUP,
            subscriptionId=subscription_id,
            resourceGroupName=resource_group_name,
        )

    def get(
        self, subscription_id: str, resource_group_name: str, profile_name: str
    ) -> Response[Profile]:
        return self._client.call(
            PROFILES_GET,
            subscriptionId=subscription_id,
            resourceGroupName=resource_group_name,
            profileName=profile_name,
        )

    def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        profile: Profile,
    ) -> Response[Profile]:
        return self._client.call(
            PROFILES_CREATE,
            profile,
            subscriptionId=subscription_id,
            resourceGroupName=resource_group_name,
            profileName=profile_name,
        )

    def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        profile_update_parameters: ProfileUpdateParameters,
    ) -> Response[Profile]:
        return self._client.call(
            PROFILES_UPDATE,
            profile_update_parameters,
            subscriptionId=subscription_id,
            resourceGroupName=resource_group_name,
            profileName=profile_name,
        )

    def delete(
        self, subscription_id: str, resource_group_name: str, profile_name: str
    ) -> Response[None]:
        return self._client.call(
            PROFILES_DELETE,
            subscriptionId=subscription_id,
            resourceGroupName=resource_group_name,
            profileName=profile_name,
        )

    def list_resource_usage(
        self, subscription_id: str, resource_group_name: str, profile_name: str
    ) -> Pager[ResourceUsage]:
        """Check the quota and usage of endpoints under the profile."""
        return self._client.pager(
            PROFILES_LIST_RESOURCE_USAGE,
            subscriptionId=subscription_id,
            resourceGroupName=resource_group_name,
            profileName=profile_name,
        )


class EndpointsOperations(OperationGroup):
    def list_by_profile(
        self, subscription_id: str, resource_group_name: str, profile_name: str
    ) -> Pager[Endpoint]:
        return self._client.pager(
            ENDPOINTS_LIST_BY_PROFILE,
            subscriptionId=subscription_id,
            resourceGroupName=resource_group_name,
            profileName=profile_name,
        )

    def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
    ) -> Response[Endpoint]:
        return self._endpoint_call(
            ENDPOINTS_GET, subscription_id, resource_group_name, profile_name, endpoint_name
        )

    def start(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
    ) -> Response[Endpoint]:
        return self._endpoint_call(
            ENDPOINTS_START, subscription_id, resource_group_name, profile_name, endpoint_name
        )

    def stop(
        self,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
    ) -> Response[Endpoint]:
        return self._endpoint_call(
            ENDPOINTS_STOP, subscription_id, resource_group_name, profile_name, endpoint_name
        )

    def _endpoint_call(
        self,
        operation: Operation,
        subscription_id: str,
        resource_group_name: str,
        profile_name: str,
        endpoint_name: str,
    ) -> Response[Endpoint]:
        return self._client.call(
            operation,
            subscriptionId=subscription_id,
            resourceGroupName=resource_group_name,
            profileName=profile_name,
            endpointName=endpoint_name,
        )


class CdnClient(OperationGroup):
    """Entry point for the Microsoft.Cdn operation groups."""

    @property
    def profiles(self) -> ProfilesOperations:
        return ProfilesOperations(self._client)

    @property
    def endpoints(self) -> EndpointsOperations:
        return EndpointsOperations(self._client)

    def check_name_availability(
        self, check_name_availability_input: CheckNameAvailabilityInput
    ) -> Response[CheckNameAvailabilityOutput]:
        """Check whether an endpoint name is available (globally unique)."""
        return self._client.call(CHECK_NAME_AVAILABILITY, check_name_availability_input)
