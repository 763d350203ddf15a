"""In-memory collections backing the mock backend."""
import copy
from typing import Any, Dict, List, Optional, Tuple
from uuid import uuid4

Key = Tuple[str, ...]


class RecordNotFound(KeyError):
    pass


class DuplicateRecord(ValueError):
    pass


class MissingKey(ValueError):
    pass


class Collection:
    """
    One resource's records, keyed by `key_fields`.

    A single-field key is assigned by the server on create (`<prefix>-xxxxxxxx`);
    composite keys are supplied by the client and can never change afterwards.
    """

    def __init__(self, key_fields: Tuple[str, ...], key_prefix: str = ""):
        self.key_fields = key_fields
        self.key_prefix = key_prefix
        self._records: Dict[Key, Dict[str, Any]] = {}

    def _key_of(self, record: Dict[str, Any]) -> Key:
        return tuple(str(record[name]) for name in self.key_fields)

    def all(self, filters: Optional[Dict[str, str]] = None) -> List[Dict[str, Any]]:
        records = [copy.deepcopy(r) for r in self._records.values()]
        for field, expected in (filters or {}).items():
            records = [r for r in records if str(r.get(field)) == expected]
        return records

    def get(self, key: Key) -> Dict[str, Any]:
        if key not in self._records:
            raise RecordNotFound(key)
        return copy.deepcopy(self._records[key])

    def insert(self, payload: Dict[str, Any], key: Optional[str] = None) -> Dict[str, Any]:
        """
        Store a new record. A single-field key in `payload` is ignored: the key is
        `key` when given (seeding) and freshly minted otherwise.
        """
        record = copy.deepcopy(payload)
        if len(self.key_fields) == 1:
            prefix = f"{self.key_prefix}-" if self.key_prefix else ""
            record[self.key_fields[0]] = key or f"{prefix}{uuid4().hex[:8]}"
        elif any(not record.get(name) for name in self.key_fields):
            raise MissingKey(", ".join(self.key_fields))
        record_key = self._key_of(record)
        if record_key in self._records:
            raise DuplicateRecord(record_key)
        self._records[record_key] = record
        return copy.deepcopy(record)

    def update(self, key: Key, payload: Dict[str, Any]) -> Dict[str, Any]:
        current = self.get(key)
        current.update(copy.deepcopy(payload))
        # Keys are immutable once created
        for name, value in zip(self.key_fields, key):
            current[name] = value
        self._records[key] = current
        return copy.deepcopy(current)

    def remove(self, key: Key) -> None:
        if key not in self._records:
            raise RecordNotFound(key)
        del self._records[key]


class MockStore:
    def __init__(self):
        self.collections: Dict[str, Collection] = {
            "exam-configs": Collection(("id",), "EXAM"),
            "fee-settings": Collection(("feeId",), "FEE"),
            "fee-collections": Collection(("collectionId",), "COL"),
            "custom-student-fees": Collection(("studentId", "feeId")),
            "results": Collection(("id",), "RES"),
            "users": Collection(("id",), "USR"),
        }

    def __getitem__(self, resource: str) -> Collection:
        return self.collections[resource]

    def _seed(self, resource: str, record: Dict[str, Any]) -> None:
        collection = self[resource]
        key = record[collection.key_fields[0]] if len(collection.key_fields) == 1 else None
        collection.insert(record, key=key)

    def seed(self) -> "MockStore":
        self._seed("exam-configs", {"id": "E1", "class": "Class 5", "exam": "Mid Term", "subjects": ["Mathematics", "English"]})
        self._seed("exam-configs", {"id": "E2", "class": "Class 9", "exam": "Final Term", "subjects": ["Science", "Bangla"]})
        self._seed("fee-settings", {
            "feeId": "FEE-TUITION", "feeType": "Monthly Fee", "classes": ["Class 5", "Class 6"],
            "description": "Monthly tuition", "amount": 1500, "activeFrom": "2024-01-01",
            "activeTo": "2024-12-31", "canOverride": True,
        })
        self._seed("fee-collections", {
            "collectionId": "COL-1", "date": "2024-03-05", "studentId": "STU001", "feeId": "FEE-TUITION",
            "month": "March", "year": "2024", "quantity": 1, "amountPaid": 1500,
            "paymentMethod": "Cash", "description": "",
        })
        self._seed("custom-student-fees", {
            "studentId": "STU001", "feeId": "FEE-TUITION", "newAmount": 1000,
            "effectiveFrom": "2024-02-01", "active": True, "reason": "Sibling discount",
        })
        self._seed("results", {
            "id": "R1", "studentId": "STU001", "studentName": "Alice Johnson", "class": "Class 5",
            "exam": "Mid Term", "subjects": {"Mathematics": 92, "English": 81}, "total": "173", "rank": "1",
        })
        self._seed("users", {
            "id": "u-student", "email": "alice@email.com", "role": "student", "verified": False,
            "studentData": {"studentId": "STU001", "name": "Alice Johnson", "class": "Class 5"},
        })
        self._seed("users", {
            "id": "u-staff", "email": "karim@school.edu", "role": "staff", "verified": True,
            "staffData": {"staffId": "STF001", "nameBangla": "করিম", "nameEnglish": "Karim Rahman",
                          "designation": "Assistant Teacher", "joiningDate": "2020-06-01"},
        })
        self._seed("users", {
            "id": "u-admin", "email": "admin@school.edu", "role": "admin", "verified": True,
            "staffData": {"staffId": "ADM001", "nameEnglish": "Head Office", "designation": "Administrator"},
        })
        return self
