import schemathesis
from hypothesis import HealthCheck, settings
from schemathesis.checks import not_a_server_error
from schemathesis.core import NOT_SET
from schemathesis.specs.openapi.checks import (
    content_type_conformance,
    response_schema_conformance,
    status_code_conformance,
)

from evento_api.main import app


schema = schemathesis.openapi.from_dict(app.openapi())


@schema.parametrize()
@settings(max_examples=1, suppress_health_check=[HealthCheck.function_scoped_fixture])
def test_api_contract(case: schemathesis.Case, client):
    def sanitize(value):
        if value is NOT_SET:
            return None
        if isinstance(value, dict):
            return {k: v for k, v in value.items() if v is not NOT_SET}
        return value

    response = client.request(
        method=case.method,
        url=case.formatted_path,
        headers=sanitize(case.headers),
        params=sanitize(case.query),
        json=sanitize(case.body),
    )

    case.validate_response(
        response,
        checks=(
            not_a_server_error,
            status_code_conformance,
            content_type_conformance,
            response_schema_conformance,
        ),
    )
