"""The OpenAPI document published for the docs UI."""


def test_openapi_metadata(client):
    schema = client.get("/openapi.json").json()

    assert schema["info"]["title"] == "F1 API"
    assert schema["info"]["version"] == "1.0.0"
    assert schema["externalDocs"]["url"] == "https://swagger.io"
    assert {tag["name"] for tag in schema["tags"]} == {"teams", "drivers", "test"}


def test_openapi_paths(client):
    paths = client.get("/openapi.json").json()["paths"]
    assert set(paths) == {"/test", "/teams", "/drivers", "/drivers/{id}"}
    assert paths["/teams"]["get"]["tags"] == ["teams"]


def test_driver_lookup_documents_both_outcomes(client):
    operation = client.get("/openapi.json").json()["paths"]["/drivers/{id}"]["get"]

    assert set(operation["responses"]) >= {"200", "404"}
    not_found = operation["responses"]["404"]["content"]["application/json"]["schema"]
    assert not_found["$ref"].endswith("/MessageResponse")

    (param,) = operation["parameters"]
    assert param["name"] == "id"
    assert param["in"] == "path"
    assert param["schema"]["type"] == "string"


def test_record_schemas(client):
    components = client.get("/openapi.json").json()["components"]["schemas"]
    assert set(components["TeamSchema"]["properties"]) == {"id", "name", "base"}
    assert set(components["DriverSchema"]["properties"]) == {"id", "name", "team"}
    assert components["DriverSchema"]["properties"]["id"]["type"] == "integer"


def test_docs_page_is_served(client):
    response = client.get("/docs")
    assert response.status_code == 200
    assert "swagger-ui" in response.text
    assert '"docExpansion": "full"' in response.text
