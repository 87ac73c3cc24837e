"""
Pydantic schemas for data validation and serialization.

Schemas:
    entities: Persisted entities (User, MarketingRecord, Task) and the
              data-entry payload MarketingRecordCreate
    dashboard: RecordFilter and the aggregation results
    api: API endpoint request/response schemas

Features:
    - Channel/category consistency checked on construction
    - Metric values resolved to number or text on construction
    - JSON serialization for the key-value store and the API

Usage:
    from schemas.entities import MarketingRecord, MarketingRecordCreate
    from schemas.dashboard import RecordFilter

Example:
    record = MarketingRecord(
        id="r1",
        user_id="1",
        date="2024-01-15",
        category="Organik",
        channel="Facebook",
        metrics={"Revenue": "100000", "Noted": "promo"}
    )

    assert record.metrics["Revenue"] == 100000.0
    assert record.metrics["Noted"] == "promo"
"""

__all__ = [
    "entities",
    "dashboard",
    "api",
]
