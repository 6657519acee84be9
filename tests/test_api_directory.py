import os
from pathlib import Path
from unittest.mock import patch


def test_found(client, root):
    response = client.get("/api/directory?folder=PatientA")

    assert response.status_code == 200
    body = response.get_json()
    assert body["success"] is True
    assert body["path"] == "Clinic/PatientA"
    assert "warning" not in body

    children = body["data"]["children"]
    assert children[0] == {
        "name": "Notes", "type": "directory", "path": "Clinic/PatientA/Notes",
        "children": [], "size": 0,
    }
    assert [c["type"] for c in children] == ["directory", "file", "file"]
    scan = children[2]
    assert scan["name"] == "scan1.pdf"
    assert scan["size"] == len(b"%PDF-1.7\n%Sample content for testing")
    assert "modified" in scan


def test_two_entry_scenario(client, root):
    patient = root / "PatientB"
    (patient / "Notes").mkdir(parents=True)
    (patient / "scan1.pdf").write_bytes(b"%PDF")

    body = client.get("/api/directory?folder=PatientB").get_json()

    assert body["success"] is True
    assert [c["name"] for c in body["data"]["children"]] == ["Notes", "scan1.pdf"]
    assert body["data"]["size"] == 2


def test_absolute_root_not_exposed(client, root):
    response = client.get("/api/directory?folder=PatientA")
    assert str(root) not in response.get_data(as_text=True)


def test_empty_folder_warns(client):
    response = client.get("/api/directory?folder=Empty")

    assert response.status_code == 200
    body = response.get_json()
    assert body["success"] is True
    assert body["data"]["children"] == []
    assert body["warning"]


def test_missing_param(client):
    response = client.get("/api/directory")

    assert response.status_code == 400
    body = response.get_json()
    assert body["success"] is False
    assert body["code"] == "MISSING_FOLDER_PARAM"


def test_blank_param_is_missing(client):
    response = client.get("/api/directory?folder=%20%20")
    assert response.get_json()["code"] == "MISSING_FOLDER_PARAM"


def test_invalid_name(client):
    response = client.get("/api/directory", query_string={"folder": "<script>"})

    assert response.status_code == 400
    body = response.get_json()
    assert body["code"] == "INVALID_FOLDER_NAME"
    assert body["folderName"] == "<script>"


def test_too_long_name(client):
    response = client.get("/api/directory", query_string={"folder": "x" * 51})
    assert response.status_code == 400


def test_not_found(client):
    response = client.get("/api/directory?folder=Ghost")

    assert response.status_code == 404
    body = response.get_json()
    assert body["code"] == "FOLDER_NOT_FOUND"
    assert body["folderName"] == "Ghost"


def test_access_denied(client):
    real_access = os.access

    def no_read(path, mode):
        if Path(path).name == "PatientA":
            return False
        return real_access(path, mode)

    with patch("services.folder_locator.os.access", side_effect=no_read):
        response = client.get("/api/directory?folder=PatientA")

    assert response.status_code == 403
    assert response.get_json()["code"] == "ACCESS_DENIED"


def test_system_overload(client):
    with patch("services.browser.FolderLocator.locate",
               side_effect=OSError(24, "Too many open files")):
        response = client.get("/api/directory?folder=PatientA")

    assert response.status_code == 500
    body = response.get_json()
    assert body["code"] == "SYSTEM_OVERLOAD"
    assert body["folderName"] == "PatientA"


def test_unknown_api_route_is_json(client):
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.get_json()["success"] is False


def test_root_permission_error_is_500(client, root):
    real_scandir = os.scandir

    def locked_root(path):
        if Path(path) == root.resolve():
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    with patch("services.folder_locator.os.scandir", side_effect=locked_root):
        response = client.get("/api/directory?folder=PatientA")

    assert response.status_code == 500
    body = response.get_json()
    assert body["code"] == "ACCESS_DENIED"
    assert body["folderName"] == "PatientA"
