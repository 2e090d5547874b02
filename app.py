from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional
import uvicorn

from social_balance import SocialBalanceModel, render_result, split_lines
from models.balance_checkers import BruteForceChecker, PartitionChecker
from models.errors import MissingEdgeError, ParseError, ResourceNotFoundError
from models.factory import ModelFactory

app = FastAPI(title="Structural Balance Checker")


# Request models
class CheckRequest(BaseModel):
    edge_list: str
    method: Optional[str] = None  # "brute_force" or "partition"; None uses the configured checker


class FileCheckRequest(BaseModel):
    path: str
    method: Optional[str] = None


class GraphRequest(BaseModel):
    edge_list: str


METHODS = {
    "brute_force": BruteForceChecker,
    "partition": PartitionChecker,
}

# Create model with configured strategies from factory
model = SocialBalanceModel(**ModelFactory.create_from_config())

# Print model configuration on startup
print("=" * 60)
print(ModelFactory.get_model_description())
print("=" * 60)


def _model_for(method: Optional[str]) -> SocialBalanceModel:
    """Return the configured model, or a copy of it using the requested checker"""
    if method is None:
        return model
    if method not in METHODS:
        raise HTTPException(status_code=400, detail=f"Unknown method: {method}. Available: {list(METHODS.keys())}")
    return SocialBalanceModel(
        checker=METHODS[method](balance_rule=model.checker.balance_rule),
        relationship_type=model.relationship_type,
        line_limit=model.line_limit,
        validate_counts=model.validate_counts
    )


def _method_name(m: SocialBalanceModel) -> str:
    for name, checker_class in METHODS.items():
        if isinstance(m.checker, checker_class):
            return name
    return type(m.checker).__name__


def _error_response(e: Exception) -> HTTPException:
    # Input text is never echoed back in the detail
    if isinstance(e, ParseError):
        where = f"line {e.line_number}: " if e.line_number is not None else ""
        return HTTPException(status_code=400, detail=f"ParseError: {where}{e.message}")
    if isinstance(e, ResourceNotFoundError):
        return HTTPException(status_code=404, detail=f"ResourceNotFoundError: {e}")
    return HTTPException(status_code=422, detail=f"MissingEdgeError: {e}")


@app.get("/api/model")
def get_model():
    """Describe the configured model"""
    return {
        "balance_checker": model.checker.get_name(),
        "balance_rule": model.checker.balance_rule.get_name(),
        "relationship_type": model.relationship_type.get_name(),
        "line_limit": model.line_limit,
        "validate_counts": model.validate_counts
    }


@app.post("/api/check")
def check_balance(request: CheckRequest):
    """Decide whether an edge list describes a balanced graph"""
    m = _model_for(request.method)
    print(f"[API] Check request received: method={_method_name(m)}")
    try:
        balanced = m.check(split_lines(request.edge_list))
    except (ParseError, MissingEdgeError) as e:
        print(f"[API] Check failed: {e}")
        raise _error_response(e) from e
    return {"balanced": balanced, "result": render_result(balanced), "method": _method_name(m)}


@app.post("/api/check/file")
def check_balance_file(request: FileCheckRequest):
    """Decide whether an edge-list file on the server describes a balanced graph"""
    m = _model_for(request.method)
    print(f"[API] File check request received: {request.path}")
    try:
        balanced = m.check_file(request.path)
    except (ParseError, MissingEdgeError, ResourceNotFoundError) as e:
        print(f"[API] File check failed: {e}")
        raise _error_response(e) from e
    return {"balanced": balanced, "result": render_result(balanced), "method": _method_name(m)}


@app.post("/api/graph")
def get_graph(request: GraphRequest):
    """Get graph data and statistics for an edge list"""
    try:
        graph = model.build(split_lines(request.edge_list))
    except ParseError as e:
        raise _error_response(e) from e
    graph_data = model.get_graph_data(graph)
    graph_data["stats"] = model.get_statistics(graph)
    print(f"[API] Graph data: {len(graph_data['nodes'])} nodes, {len(graph_data['links'])} links")
    return graph_data


@app.post("/api/factions")
def get_factions(request: GraphRequest):
    """Get the two factions of a balanced graph (null if not balanced)"""
    try:
        graph = model.build(split_lines(request.edge_list))
        factions = model.get_factions(graph)
    except (ParseError, MissingEdgeError) as e:
        raise _error_response(e) from e
    return {"balanced": factions is not None, "factions": factions}


if __name__ == "__main__":
    uvicorn.run("app:app", host="0.0.0.0", port=5000, reload=True)
