"""Microsoft.DataBox operations."""

from __future__ import annotations

from az_arm._operation import Operation, Response
from az_arm._pagination import Pager
from az_arm.models import OperationInfo, Page
from az_arm.models.databox import (
    AvailableSkuRequest,
    CancellationReason,
    JobResource,
    SkuInformation,
)
from az_arm.services import OperationGroup

API_VERSION = "2021-03-01"

_RG_PATH = "subscriptions/{subscriptionId}/resourceGroups/{resourceGroupName}"
_JOB_PATH = f"{_RG_PATH}/providers/Microsoft.DataBox/jobs/{{jobName}}"

OPERATIONS_LIST = Operation(
    "GET",
    "providers/Microsoft.DataBox/operations",
    API_VERSION,
    responses={200: Page[OperationInfo]},
)
JOBS_LIST = Operation(
    "GET",
    "subscriptions/{subscriptionId}/providers/Microsoft.DataBox/jobs",
    API_VERSION,
    responses={200: Page[JobResource]},
    query={"skip_token": "$skipToken"},
)
JOBS_LIST_BY_RESOURCE_GROUP = Operation(
    "GET",
    f"{_RG_PATH}/providers/Microsoft.DataBox/jobs",
    API_VERSION,
    responses={200: Page[JobResource]},
    query={"skip_token": "$skipToken"},
)
JOBS_GET = Operation(
    "GET", _JOB_PATH, API_VERSION, responses={200: JobResource}, query={"expand": "$expand"}
)
JOBS_CREATE = Operation(
    "PUT",
    _JOB_PATH,
    API_VERSION,
    responses={200: JobResource, 202: None},
    body=JobResource,
)
JOBS_DELETE = Operation(
    "DELETE", _JOB_PATH, API_VERSION, responses={200: None, 202: None, 204: None}
)
JOBS_CANCEL = Operation(
    "POST",
    f"{_JOB_PATH}/cancel",
    API_VERSION,
    responses={204: None},
    body=CancellationReason,
)
SERVICE_LIST_AVAILABLE_SKUS_BY_RESOURCE_GROUP = Operation(
    "POST",
    f"{_RG_PATH}/providers/Microsoft.DataBox/locations/{{location}}/availableSkus",
    API_VERSION,
    responses={200: Page[SkuInformation]},
    body=AvailableSkuRequest,
)


class OperationsOperations(OperationGroup):
    def list(self) -> Pager[OperationInfo]:
        return self._client.pager(OPERATIONS_LIST)


class JobsOperations(OperationGroup):
    def list(self, subscription_id: str, skip_token: str | None = None) -> Pager[JobResource]:
        return self._client.pager(JOBS_LIST, subscriptionId=subscription_id, skip_token=skip_token)

    def list_by_resource_group(
        self,
        subscription_id: str,
        resource_group_name: str,
        skip_token: str | None = None,
    ) -> Pager[JobResource]:
        return self._client.pager(
            JOBS_LIST_BY_RESOURCE_GROUP,
            subscriptionId=subscription_id,
            resourceGroupName=resource_group_name,
            skip_token=skip_token,
        )

    def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        job_name: str,
        expand: str | None = None,
    ) -> Response[JobResource]:
        """Gets a job; *expand* accepts ``details`` to include the job details."""
        return self._client.call(
            JOBS_GET,
            subscriptionId=subscription_id,
            resourceGroupName=resource_group_name,
            jobName=job_name,
            expand=expand,
        )

    def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        job_name: str,
        job_resource: JobResource,
    ) -> Response[JobResource]:
        return self._client.call(
            JOBS_CREATE,
            job_resource,
            subscriptionId=subscription_id,
            resourceGroupName=resource_group_name,
            jobName=job_name,
        )

    def delete(
        self, subscription_id: str, resource_group_name: str, job_name: str
    ) -> Response[None]:
        return self._client.call(
            JOBS_DELETE,
            subscriptionId=subscription_id,
            resourceGroupName=resource_group_name,
            jobName=job_name,
        )

    def cancel(
        self,
        subscription_id: str,
        resource_group_name: str,
        job_name: str,
        cancellation_reason: CancellationReason,
    ) -> Response[None]:
        return self._client.call(
            JOBS_CANCEL,
            cancellation_reason,
            subscriptionId=subscription_id,
            resourceGroupName=resource_group_name,
            jobName=job_name,
        )


class ServiceOperations(OperationGroup):
    def list_available_skus_by_resource_group(
        self,
        subscription_id: str,
        resource_group_name: str,
        location: str,
        available_sku_request: AvailableSkuRequest,
    ) -> Pager[SkuInformation]:
        """POST-based listing: the request body goes with the first page only."""
        return self._client.pager(
            SERVICE_LIST_AVAILABLE_SKUS_BY_RESOURCE_GROUP,
            available_sku_request,
            subscriptionId=subscription_id,
            resourceGroupName=resource_group_name,
            location=location,
        )


class DataBoxClient(OperationGroup):
    """Entry point for the Microsoft.DataBox operation groups."""

    @property
    def operations(self) -> OperationsOperations:
        return OperationsOperations(self._client)

    @property
    def jobs(self) -> JobsOperations:
        return JobsOperations(self._client)

    @property
    def service(self) -> ServiceOperations:
        return ServiceOperations(self._client)
