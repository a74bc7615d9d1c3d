"""DynamoDB translation store.

Table schema:
- Partition Key: translation_id (length-prefixed composite of key, language
  code, plural index and namespace; see TranslationKey.cache_key)
- Attributes: tr_key, language_code, pluralization_index, namespace,
  text, default_text, description
- A miss record stores text as the DynamoDB NULL type

Uniqueness per translation variant comes from the partition key: create()
is a conditional put that fails when the item already exists.
"""

import threading
from typing import Any, Dict, List, Optional

import boto3  # type: ignore
from botocore.exceptions import ClientError  # type: ignore

from infrastructure.i18n.models import TranslationKey, TranslationRecord
from infrastructure.logging import get_module_logger
from infrastructure.persistence.translation_store import (
    DuplicateTranslationError,
    TranslationStore,
)

logger = get_module_logger()

TABLE_NAME = "view_translations"
PARTITION_KEY = "translation_id"

_OPTIONAL_TEXT_ATTRIBUTES = ("text", "default_text", "description")


def _string_or_null(value: Optional[str]) -> Dict[str, Any]:
    return {"NULL": True} if value is None else {"S": value}


def _read_string(item: Dict[str, Any], name: str) -> Optional[str]:
    attribute = item.get(name)
    if not attribute or "S" not in attribute:
        return None
    return attribute["S"]


def to_item(record: TranslationRecord) -> Dict[str, Any]:
    """Convert a record into a DynamoDB item.

    Args:
        record: Record to convert.

    Returns:
        Item in DynamoDB attribute-value format.
    """
    item = {
        PARTITION_KEY: {"S": record.translation_key.cache_key},
        "tr_key": {"S": record.key},
        "language_code": {"S": record.language_code},
        "pluralization_index": {"N": str(record.plural_index)},
    }
    if record.namespace is not None:
        item["namespace"] = {"S": record.namespace}
    for name in _OPTIONAL_TEXT_ATTRIBUTES:
        item[name] = _string_or_null(getattr(record, name))
    return item


def from_item(item: Dict[str, Any]) -> TranslationRecord:
    """Convert a DynamoDB item into a record.

    Args:
        item: Item in DynamoDB attribute-value format.

    Returns:
        TranslationRecord instance.
    """
    return TranslationRecord(
        key=item["tr_key"]["S"],
        language_code=item["language_code"]["S"],
        plural_index=int(item["pluralization_index"]["N"]),
        text=_read_string(item, "text"),
        default_text=_read_string(item, "default_text"),
        description=_read_string(item, "description"),
        namespace=_read_string(item, "namespace"),
    )


def _error_code(error: ClientError) -> str:
    return error.response.get("Error", {}).get("Code", "")


class DynamoDBTranslationStore(TranslationStore):
    """DynamoDB-backed translation store.

    Client errors other than the conditional-check failure raised on a
    duplicate create propagate unmodified; retries are left to the boto3
    client configuration.

    transaction() serializes callers inside this process. Across processes
    the conditional put keeps a single record per variant and the caller
    re-picks after a DuplicateTranslationError.
    """

    def __init__(
        self,
        table_name: str = TABLE_NAME,
        client: Any = None,
        region: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ):
        """Initialize DynamoDB translation store.

        Args:
            table_name: DynamoDB table name (default: view_translations).
            client: Optional pre-configured boto3 DynamoDB client.
            region: AWS region used when no client is given.
            endpoint_url: Custom endpoint (LocalStack, dynamodb-local) used
                when no client is given.
        """
        self.table_name = table_name
        if client is None:
            client_config: Dict[str, Any] = {}
            if region:
                client_config["region_name"] = region
            if endpoint_url:
                client_config["endpoint_url"] = endpoint_url
            client = boto3.client("dynamodb", **client_config)
        self._client = client
        self._lock = threading.RLock()
        logger.info(
            "initialized_dynamodb_translation_store",
            table_name=table_name,
            region=region,
        )

    def pick(
        self,
        key: str,
        language_code: str,
        plural_index: int,
        namespace: Optional[str] = None,
    ) -> Optional[TranslationRecord]:
        lookup = TranslationKey(key, language_code, plural_index, namespace)
        response = self._client.get_item(
            TableName=self.table_name,
            Key={PARTITION_KEY: {"S": lookup.cache_key}},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return from_item(item)

    def create(self, record: TranslationRecord) -> TranslationRecord:
        try:
            self._client.put_item(
                TableName=self.table_name,
                Item=to_item(record),
                ConditionExpression=f"attribute_not_exists({PARTITION_KEY})",
            )
        except ClientError as e:
            if _error_code(e) == "ConditionalCheckFailedException":
                logger.info(
                    "translation_record_already_exists",
                    key=record.key,
                    language_code=record.language_code,
                    plural_index=record.plural_index,
                )
                raise DuplicateTranslationError(record.translation_key) from e
            raise
        logger.debug(
            "translation_record_created",
            key=record.key,
            language_code=record.language_code,
            plural_index=record.plural_index,
            missing=record.is_missing,
        )
        return record

    def update(self, record: TranslationRecord, text: Optional[str]) -> TranslationRecord:
        self._client.update_item(
            TableName=self.table_name,
            Key={PARTITION_KEY: {"S": record.translation_key.cache_key}},
            UpdateExpression="SET #text = :text",
            ConditionExpression=f"attribute_exists({PARTITION_KEY})",
            ExpressionAttributeNames={"#text": "text"},
            ExpressionAttributeValues={":text": _string_or_null(text)},
        )
        record.text = text
        return record

    def save(self, record: TranslationRecord) -> TranslationRecord:
        self._client.put_item(
            TableName=self.table_name,
            Item=to_item(record),
            ConditionExpression=f"attribute_exists({PARTITION_KEY})",
        )
        return record

    def transaction(self) -> threading.RLock:
        return self._lock

    def records(
        self,
        language_code: Optional[str] = None,
        namespace: Optional[str] = None,
    ) -> List[TranslationRecord]:
        scan_kwargs: Dict[str, Any] = {"TableName": self.table_name}
        filters = []
        values: Dict[str, Any] = {}
        if language_code is not None:
            filters.append("language_code = :language_code")
            values[":language_code"] = {"S": language_code}
        if namespace is not None:
            filters.append("#namespace = :namespace")
            values[":namespace"] = {"S": namespace}
            scan_kwargs["ExpressionAttributeNames"] = {"#namespace": "namespace"}
        if filters:
            scan_kwargs["FilterExpression"] = " AND ".join(filters)
            scan_kwargs["ExpressionAttributeValues"] = values

        paginator = self._client.get_paginator("scan")
        found = []
        for page in paginator.paginate(**scan_kwargs):
            found.extend(from_item(item) for item in page.get("Items", []))
        return found

    def get_stats(self) -> Dict[str, Any]:
        return {
            "backend": "dynamodb",
            "table_name": self.table_name,
            "partition_key": PARTITION_KEY,
        }
