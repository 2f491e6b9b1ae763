from fastapi import FastAPI, HTTPException

from columntypes.router import route
from columntypes.utils.exceptions import ColumnTypesError

app = FastAPI(
    title="Column Type Accelerator",
    version="1.0.0"
)


def _dispatch(action: str, payload: dict) -> dict:
    try:
        return route({**payload, "action": action})
    except ColumnTypesError as e:
        # Bad input -> client error, not server crash
        raise HTTPException(
            status_code=422,
            detail={
                "status": "ERROR",
                "message": str(e),
            }
        )


@app.post("/render-type")
def render_type(payload: dict):
    return _dispatch("render", payload)


@app.post("/column-diff")
def column_diff(payload: dict):
    return _dispatch("diff", payload)


@app.post("/compare-columns")
def compare_columns(payload: dict):
    return _dispatch("compare_columns", payload)
