"""Pydantic models for MCP tool responses.

Every tool returns ``model_dump()`` of one of these so the MCP surface
always emits a consistent JSON shape.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from querylens.models.query_models import Parameter, QuickAction


# ============================================================================
# Query analysis response models
# ============================================================================

class QueryTablesResponse(BaseModel):
    """Response model for list_query_tables tool."""

    tables: List[str] = Field(..., description="Referenced table names, sorted")
    count: int = Field(..., ge=0, description="Number of distinct tables")


class QueryParametersResponse(BaseModel):
    """Response model for detect_query_parameters tool."""

    parameters: List[Parameter] = Field(..., description="Detected placeholders in first-seen order")
    count: int = Field(..., ge=0, description="Number of distinct placeholders")


class QueryAnalysisResponse(BaseModel):
    """Response model for analyze_sql_query tool."""

    tables: List[str] = Field(..., description="Referenced table names, sorted")
    table_count: int = Field(..., ge=0)
    parameters: List[Parameter] = Field(..., description="Detected placeholders in first-seen order")
    parameter_count: int = Field(..., ge=0)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "tables": ["orders"],
                "table_count": 1,
                "parameters": [
                    {
                        "name": "start_date",
                        "type": "date",
                        "format": "colon",
                        "placeholder": ":start_date"
                    }
                ],
                "parameter_count": 1
            }
        }
    )


# ============================================================================
# Substitution and lookup response models
# ============================================================================

class SubstitutionResponse(BaseModel):
    """Response model for substitute_query_parameters tool."""

    query: str = Field(..., description="Query text with values substituted")
    substituted: List[str] = Field(..., description="Names for which a value was applied")
    missing: List[str] = Field(default_factory=list, description="Detected names left without a value")


class SavedQueryMatchResponse(BaseModel):
    """Response model for find_queries_for_table tool."""

    table_name: str
    queries: List[Dict[str, Any]] = Field(..., description="Saved query records referencing the table")
    count: int = Field(..., ge=0)


class QuickActionResponse(BaseModel):
    """Response model for generate_quick_action tool."""

    table_name: str
    action: QuickAction
    query: str = Field(..., description="Generated SQL text")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "table_name": "orders",
                "action": "sample",
                "query": "SELECT * FROM orders LIMIT 100"
            }
        }
    )


# ============================================================================
# Error response model
# ============================================================================

class ErrorResponse(BaseModel):
    """Error payload returned by tool handlers instead of raising."""

    error: str
    recoverable: bool
    details: Optional[Dict[str, Any]] = None
