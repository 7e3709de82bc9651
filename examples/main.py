"""
Example usage of schemalog.

Shows a logger for each standard and a FastAPI application whose
requests are logged in the http.request.v1 standard.

Run the application with:
    uvicorn examples.main:app
"""

from fastapi import FastAPI, Request

from schemalog import FieldsAdapter, HTTPRequest, LoggingSettings, Standard, setup_logger
from schemalog.middleware import configure_request_logging

# Keep up to 20 frames of every error trace
settings = LoggingSettings(SERVICE="example", MAX_STACK_TRACE=20, LEVEL="DEBUG")


def app_logs_v1_example() -> None:
    logger = setup_logger("example.app", Standard.APP_LOGS_V1, settings=settings)

    # OUTPUT: {"schema":"app.logs.v1","service":"example","channel":"TEST","level":"debug",
    #          "time":"...","msg":"test app.logs.v1 log","ctx":{"foo":"bar","error":{"msg":"wow","trace":[...]}}}
    try:
        raise ValueError("wow")
    except ValueError as exc:
        FieldsAdapter(logger).with_fields(channel="TEST", foo="bar").with_error(exc).debug(
            "test %s log", Standard.APP_LOGS_V1.value
        )


def http_request_v1_example() -> None:
    logger = setup_logger("example.http", Standard.HTTP_REQUEST_V1, settings=settings)

    request = HTTPRequest(
        method="GET",
        path="/test",
        query_string="foo=bar",
        remote_addr="1.2.3.4:1234",
        headers={"x-test": "1"},
    )

    # OUTPUT: {"schema":"http.request.v1","service":"example","level":"info","time":"...","ip":"1.2.3.4",
    #          "method":"GET","path":"/test","user":"123","headers":{"X-Test":"1"},"get":{"foo":"bar"},"extra":{"status":404}}
    logger.info("", extra={"request": request, "status": 404, "user": 123})


app = FastAPI()
configure_request_logging(
    app,
    request_logger=setup_logger("example.access", Standard.HTTP_REQUEST_V1, settings=settings),
    exclude_paths=["/health"],
)


@app.get("/items/{item_id}")
def read_item(item_id: int, request: Request):
    request.state.user = "demo"
    return {"item_id": item_id}


@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    app_logs_v1_example()
    http_request_v1_example()
