import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union

from dataclasses_json import DataClassJsonMixin
from pydantic import BaseModel, ConfigDict

JSONValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]


@dataclass(frozen=True)
class ClientConfiguration:
    """Dataclass for the immutable configuration of a client.

    Attributes:
        api_key: The full API key, used as the Basic auth password.
        data_center: The region token taken from the API key.
        base_url: The endpoint every request path is appended to.
    """

    api_key: str
    data_center: str
    base_url: str


@dataclass(frozen=True)
class BatchOperation(DataClassJsonMixin):
    """Dataclass for a single operation of a batch.

    Attributes:
        method: The HTTP method of the operation.
        path: The API path of the operation, relative to the API root.
        body: The payload of the operation, any JSON serialisable value.
    """

    method: str
    path: str
    body: Any = None

    def to_wire(self) -> dict:
        # body is passed through unconverted
        return {"method": self.method, "path": self.path, "body": self.body}


@dataclass
class Batch:
    """Ordered collection of operations submitted as a single request.

    Operations are only ever appended. Appending is not synchronised, callers
    sharing a batch between threads must guard ``add_operation`` with a lock.
    """

    operations: List[BatchOperation] = field(default_factory=list)

    def add_operation(self, method: str, path: str, body: Any = None) -> "Batch":
        return self.add(BatchOperation(method=method, path=path, body=body))

    def add(self, operation: BatchOperation) -> "Batch":
        self.operations.append(operation)
        return self

    def to_wire(self) -> List[dict]:
        return [operation.to_wire() for operation in self.operations]

    @classmethod
    def from_wire(cls, operations: List[dict]) -> "Batch":
        return cls(
            operations=[BatchOperation.from_dict(operation) for operation in operations]
        )

    def encode_operations(self) -> str:
        """Encode operations into the JSON string embedded in the batch envelope.

        Returns:
            The operation array serialised as a JSON string.

        Raises:
            TypeError: If any operation body is not JSON serialisable.
            ValueError: If any operation body holds a NaN or infinite float.
        """
        return json.dumps(self.to_wire(), allow_nan=False)

    def __len__(self) -> int:
        return len(self.operations)

    def __iter__(self) -> Iterator[BatchOperation]:
        return iter(self.operations)


def create_batch() -> Batch:
    return Batch()


class BatchResponse(BaseModel):
    """Acknowledgement returned by the API after accepting a batch.

    Fields not listed here are kept as extra attributes so that the response
    can be dumped back unchanged with ``model_dump()``.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    status: str
    total_operations: Optional[int] = None
    finished_operations: Optional[int] = None
    errored_operations: Optional[int] = None
    submitted_at: Optional[str] = None
    completed_at: Optional[str] = None
    response_body_url: Optional[str] = None
