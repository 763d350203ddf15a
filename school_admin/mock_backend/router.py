import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, HTTPException, Request, status

from school_admin.dashboards import sample_data
from school_admin.mock_backend.store import Collection, DuplicateRecord, MissingKey, RecordNotFound

logger = logging.getLogger(__name__)

LIST_KEYS = {
    "exam-configs": "configs",
    "fee-settings": "feeSettings",
    "fee-collections": "collections",
    "custom-student-fees": "customFees",
    "results": "results",
    "users": "users",
}


def build_collection_router(resource: str, collection: Collection) -> APIRouter:
    """Collector-pattern routes for one resource; composite keys take one path segment each."""
    router = APIRouter(prefix=f"/{resource}", tags=[resource])
    key_template = "/".join(f"{{key{i}}}" for i in range(len(collection.key_fields)))
    list_key = LIST_KEYS[resource]

    def _key(request: Request):
        return tuple(request.path_params[f"key{i}"] for i in range(len(collection.key_fields)))

    @router.get("")
    def list_records(request: Request):
        """Whole collection; query parameters narrow it by exact field match."""
        return {list_key: collection.all(dict(request.query_params))}

    @router.post("", status_code=status.HTTP_201_CREATED)
    def create_record(payload: Dict[str, Any] = Body(...)):
        try:
            record = collection.insert(payload)
        except MissingKey as e:
            raise HTTPException(status_code=422, detail=f"Missing key field(s): {e}")
        except DuplicateRecord:
            raise HTTPException(status_code=409, detail=f"{resource} record already exists")
        logger.info(f"Created {resource} record {[record[name] for name in collection.key_fields]}")
        return record

    @router.put(f"/{key_template}")
    def update_record(request: Request, payload: Dict[str, Any] = Body(...)):
        try:
            return collection.update(_key(request), payload)
        except RecordNotFound:
            raise HTTPException(status_code=404, detail=f"{resource} record not found")

    @router.delete(f"/{key_template}")
    def delete_record(request: Request):
        try:
            collection.remove(_key(request))
        except RecordNotFound:
            raise HTTPException(status_code=404, detail=f"{resource} record not found")
        return {"success": True}

    return router


dashboard_router = APIRouter(prefix="/api", tags=["dashboards"])


@dashboard_router.get("/dashboard")
def dashboard_stats():
    return sample_data.SAMPLE_STATS


@dashboard_router.get("/students")
def list_students():
    return sample_data.SAMPLE_STUDENTS


@dashboard_router.get("/teachers")
def list_teachers():
    return sample_data.SAMPLE_TEACHERS


@dashboard_router.get("/classes")
def list_classes():
    return sample_data.SAMPLE_CLASSES


@dashboard_router.get("/attendance")
def list_attendance(date: str = ""):
    records = sample_data.sample_attendance()
    if date:
        records = [{**r, "date": date[:10]} for r in records]
    return records


@dashboard_router.get("/grades")
def list_grades():
    return sample_data.SAMPLE_GRADES
