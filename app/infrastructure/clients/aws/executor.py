"""Low level AWS call execution.

Provides `get_boto3_client` and `execute_aws_api_call`, which wraps a single
boto3 call with throttling retries and maps the outcome onto
`OperationResult`. Nothing here reads settings; configuration arrives as
parameters built by `SessionProvider`.
"""

import time
from typing import Any, Dict, List, Optional

import boto3  # type: ignore
from botocore.client import BaseClient  # type: ignore
from botocore.exceptions import BotoCoreError, ClientError  # type: ignore

from infrastructure.logging import get_module_logger
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

logger = get_module_logger()

THROTTLING_CODES = frozenset(
    {
        "Throttling",
        "ThrottlingException",
        "RequestLimitExceeded",
        "ProvisionedThroughputExceededException",
    }
)
UNAUTHORIZED_CODES = frozenset(
    {"AccessDeniedException", "UnrecognizedClientException", "UnauthorizedOperation"}
)
NOT_FOUND_CODES = frozenset({"ResourceNotFoundException"})


def get_boto3_client(
    service_name: str,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
    role_arn: Optional[str] = None,
    session_name: str = "TranslationServiceSession",
) -> BaseClient:
    """Create a boto3 client for the given service.

    Args:
        service_name: AWS service name (e.g., 'dynamodb')
        session_config: Optional boto3 session kwargs (e.g., region_name)
        client_config: Optional client kwargs (e.g., endpoint_url)
        role_arn: Optional role to assume before creating the client
        session_name: Name for the assumed role session

    Returns:
        botocore client instance
    """
    session_config = session_config or {}
    client_config = client_config or {}

    if role_arn:
        sts = boto3.client("sts")
        creds = sts.assume_role(RoleArn=role_arn, RoleSessionName=session_name)[
            "Credentials"
        ]
        session = boto3.Session(
            aws_access_key_id=creds["AccessKeyId"],
            aws_secret_access_key=creds["SecretAccessKey"],
            aws_session_token=creds["SessionToken"],
            **session_config,
        )
    else:
        session = boto3.Session(**session_config)

    return session.client(service_name, **client_config)


def _calculate_retry_delay(attempt: int, backoff_factor: float) -> float:
    return backoff_factor * (2**attempt)


def _collect_pages(client: BaseClient, method: str, keys: List[str], kwargs) -> list:
    results: List[Any] = []
    for page in client.get_paginator(method).paginate(**kwargs):
        for key in keys:
            if isinstance(page.get(key), list):
                results.extend(page[key])
    return results


def _map_client_error(e: ClientError) -> OperationResult:
    error = e.response.get("Error", {})
    error_code = error.get("Code")
    message = error.get("Message", str(e))

    if error_code in THROTTLING_CODES:
        return OperationResult.transient_error(message=message, error_code=error_code)
    if error_code in UNAUTHORIZED_CODES:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED, message=message, error_code=error_code
        )
    if error_code in NOT_FOUND_CODES:
        return OperationResult.error(
            OperationStatus.NOT_FOUND, message=message, error_code=error_code
        )
    return OperationResult.permanent_error(message=message, error_code=error_code)


def execute_aws_api_call(
    service_name: str,
    method: str,
    keys: Optional[List[str]] = None,
    role_arn: Optional[str] = None,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
    max_retries: int = 3,
    force_paginate: bool = False,
    backoff_factor: float = 0.5,
    **kwargs,
) -> OperationResult:
    """Execute an AWS API call with retries and standardized results.

    Throttling errors are retried with exponential backoff up to
    ``max_retries`` times. Every other failure is returned immediately.

    Args:
        service_name: AWS service name
        method: Client method name (e.g. 'put_item')
        keys: Page keys to flatten when ``force_paginate`` is set
        role_arn: Optional role to assume
        session_config: boto3 session kwargs
        client_config: boto3 client kwargs
        max_retries: Retry budget for throttling errors
        force_paginate: Use the method's paginator and flatten ``keys``
        backoff_factor: Base delay in seconds for the backoff
        **kwargs: Parameters forwarded to the boto3 method

    Returns:
        OperationResult wrapping the raw response (or flattened list)
    """
    for attempt in range(max_retries + 1):
        try:
            client = get_boto3_client(
                service_name,
                session_config=session_config,
                client_config=client_config,
                role_arn=role_arn,
            )
            if force_paginate and keys:
                data = _collect_pages(client, method, keys, kwargs)
            else:
                data = getattr(client, method)(**kwargs)
            return OperationResult.success(
                data=data, message=f"{service_name}.{method} succeeded"
            )

        except ClientError as e:
            mapped = _map_client_error(e)
            if (
                mapped.status == OperationStatus.TRANSIENT_ERROR
                and attempt < max_retries
            ):
                delay = _calculate_retry_delay(attempt, backoff_factor)
                logger.warning(
                    "aws_api_retry",
                    service=service_name,
                    method=method,
                    attempt=attempt + 1,
                    error=str(e),
                    delay=delay,
                )
                time.sleep(delay)
                continue

            logger.error(
                "aws_api_error_final",
                service=service_name,
                method=method,
                error_code=mapped.error_code,
                error=str(e),
            )
            return mapped

        except BotoCoreError as e:
            logger.error(
                "aws_api_unexpected_error",
                service=service_name,
                method=method,
                error=str(e),
            )
            return OperationResult.transient_error(message=str(e))

    return OperationResult.permanent_error(message="retries_exhausted")
