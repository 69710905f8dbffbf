import json
from pathlib import Path

import httpx
import pytest

from api_learn.core.config import AppConfig
from api_learn.domain.models import Post
from api_learn.network.client import ApiClient
from api_learn.services.file_upload_service import FileUploadService
from api_learn.services.post_service import PostApiService
from api_learn.services.user_service import UserApiService

POSTS = [
    {"id": 1, "userId": 1, "title": "first", "body": "first body"},
    {"id": 2, "userId": 2, "title": "second", "body": "second body"},
]


def _api_client(handler, **config_overrides) -> ApiClient:
    params = {"enable_logging": False, "max_retries": 0}
    params.update(config_overrides)
    http_client = httpx.Client(transport=httpx.MockTransport(handler))
    return ApiClient(http_client, AppConfig(**params))


def test_get_all_posts_success():
    service = PostApiService(_api_client(lambda request: httpx.Response(200, json=POSTS)))

    response = service.get_all_posts()

    assert response.is_success
    assert [post.id for post in response.data] == [1, 2]
    assert response.message == "Successfully fetched 2 posts"


def test_get_all_posts_server_error_becomes_failure():
    service = PostApiService(
        _api_client(lambda request: httpx.Response(500, json={"message": "down"}))
    )

    response = service.get_all_posts()

    assert response.is_success is False
    assert response.error.type == "ServerError"
    assert response.status_code == 500


def test_get_all_posts_network_error_becomes_failure():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    response = PostApiService(_api_client(handler)).get_all_posts()

    assert response.error.type == "NetworkError"
    assert "Unable to connect" in response.error.message


def test_malformed_payload_becomes_failure():
    service = PostApiService(_api_client(lambda request: httpx.Response(200, json={"oops": 1})))

    response = service.get_all_posts()

    assert response.error.type == "MalformedResponseError"
    assert response.error.message.startswith("An unexpected error occurred")


def test_get_post_by_id_not_found():
    service = PostApiService(_api_client(lambda request: httpx.Response(404, json={})))

    response = service.get_post_by_id(999)

    assert response.error.type == "NotFoundError"
    assert response.error.message == "Post with ID 999 not found"
    assert response.status_code == 404


def test_get_posts_by_user_sends_query():
    captured = {}

    def handler(request):
        captured["params"] = dict(request.url.params)
        return httpx.Response(200, json=POSTS[:1])

    response = PostApiService(_api_client(handler)).get_posts_by_user(1)

    assert captured["params"] == {"userId": "1"}
    assert response.message == "Found 1 posts for user #1"


def test_get_posts_paginated_reads_total_count():
    captured = {}

    def handler(request):
        captured["params"] = dict(request.url.params)
        return httpx.Response(200, json=POSTS, headers={"x-total-count": "25"})

    response = PostApiService(_api_client(handler)).get_posts_paginated(page=2, limit=10)

    assert captured["params"] == {"_page": "2", "_limit": "10"}
    assert response.pagination.total_pages == 3
    assert response.pagination.has_next_page is True


def test_get_posts_paginated_rejects_bad_page():
    def handler(request):  # pragma: no cover - must not be called
        raise AssertionError("no request expected")

    response = PostApiService(_api_client(handler)).get_posts_paginated(page=0)

    assert response.error.type == "ValidationFailedError"


def test_create_post_sends_camel_case_payload():
    captured = {}

    def handler(request):
        captured["body"] = json.loads(request.content)
        return httpx.Response(201, json={"id": 101, **captured["body"]})

    response = PostApiService(_api_client(handler)).create_post(
        title="hello", body="a body of text", user_id=3
    )

    assert captured["body"] == {"title": "hello", "body": "a body of text", "userId": 3}
    assert response.data.id == 101
    assert response.status_code == 201


def test_create_post_rejected_with_unexpected_status():
    service = PostApiService(
        _api_client(lambda request: httpx.Response(400, json={"message": "bad"}))
    )

    response = service.create_post(title="t", body="b", user_id=1)

    assert response.error.type == "BadRequestError"
    assert response.error.message == "Failed to create post"


def test_update_post_uses_put_with_full_body():
    captured = {}

    def handler(request):
        captured["method"] = request.method
        captured["body"] = json.loads(request.content)
        return httpx.Response(200, json=captured["body"])

    service = PostApiService(_api_client(handler))

    response = service.update_post(Post(id=1, user_id=1, title="new", body="body"))

    assert captured["method"] == "PUT"
    assert captured["body"] == {"id": 1, "userId": 1, "title": "new", "body": "body"}
    assert response.data.title == "new"


def test_patch_post_sends_only_changed_fields():
    captured = {}

    def handler(request):
        captured["method"] = request.method
        captured["body"] = json.loads(request.content)
        return httpx.Response(
            200, json={"id": 1, "userId": 1, "title": "patched", "body": "old"}
        )

    response = PostApiService(_api_client(handler)).patch_post(1, title="patched")

    assert captured == {"method": "PATCH", "body": {"title": "patched"}}
    assert response.data.title == "patched"


def test_patch_post_without_fields_is_rejected_locally():
    def handler(request):  # pragma: no cover - must not be called
        raise AssertionError("no request expected")

    response = PostApiService(_api_client(handler)).patch_post(1)

    assert response.error.message == "No fields to update"
    assert response.status_code == 400


@pytest.mark.parametrize("status", [200, 204])
def test_delete_post_accepts_ok_and_no_content(status):
    service = PostApiService(_api_client(lambda request: httpx.Response(status)))

    response = service.delete_post(5)

    assert response.is_success
    assert response.data is None
    assert response.message == "Post #5 deleted successfully"


def test_user_service_fetches_users():
    users = [{"id": 1, "name": "A", "username": "a", "email": "a@example.test"}]
    service = UserApiService(_api_client(lambda request: httpx.Response(200, json=users)))

    assert service.get_all_users().data[0].username == "a"


def test_user_service_not_found():
    service = UserApiService(_api_client(lambda request: httpx.Response(404)))

    assert service.get_user_by_id(42).error.message == "User with ID 42 not found"


def _upload_service(handler, **config_overrides) -> FileUploadService:
    return FileUploadService(_api_client(handler, **config_overrides))


def test_upload_file_reports_progress(tmp_path: Path):
    captured = {}

    def handler(request):
        captured["url"] = str(request.url)
        captured["body"] = request.read()
        return httpx.Response(200, json={"files": {}})

    path = tmp_path / "notes.txt"
    path.write_bytes(b"0123456789")
    progress = []

    response = _upload_service(handler).upload_file(path, on_progress=progress.append)

    assert response.is_success
    assert response.data.filename == "notes.txt"
    assert response.data.file_size == 10
    assert response.data.mime_type == "text/plain"
    assert [p.sent_bytes for p in progress] == [0, 10]
    assert captured["url"] == "https://httpbin.org/post"
    assert b'name="description"' in captured["body"]
    assert b'name="timestamp"' in captured["body"]


def test_upload_missing_file(tmp_path: Path):
    response = _upload_service(lambda request: httpx.Response(200)).upload_file(
        tmp_path / "missing.bin"
    )

    assert response.error.type == "FileNotFoundError"


def test_upload_file_too_large(tmp_path: Path):
    path = tmp_path / "big.bin"
    path.write_bytes(b"x" * 2048)

    response = _upload_service(
        lambda request: httpx.Response(200), max_file_size=1024
    ).upload_file(path)

    assert response.error.type == "FileTooLargeError"


def test_upload_failure_status(tmp_path: Path):
    path = tmp_path / "a.txt"
    path.write_text("data")

    response = _upload_service(lambda request: httpx.Response(413)).upload_file(path)

    assert response.error.message == "File upload failed"
    assert response.status_code == 413


def test_upload_multiple_files(tmp_path: Path):
    captured = {}

    def handler(request):
        captured["body"] = request.read()
        return httpx.Response(200, json={})

    paths = []
    for name in ("a.txt", "b.txt"):
        path = tmp_path / name
        path.write_text(name)
        paths.append(path)

    response = _upload_service(handler).upload_multiple_files(paths)

    assert response.message == "2 files uploaded successfully"
    assert [item.filename for item in response.data] == ["a.txt", "b.txt"]
    assert captured["body"].count(b'name="files"') == 2


def test_upload_multiple_files_requires_selection():
    response = _upload_service(lambda request: httpx.Response(200)).upload_multiple_files([])

    assert response.error.message == "No files selected"


def test_upload_file_with_data_sends_extra_fields(tmp_path: Path):
    captured = {}

    def handler(request):
        captured["body"] = request.read()
        return httpx.Response(201, json={})

    path = tmp_path / "a.txt"
    path.write_text("data")

    response = _upload_service(handler).upload_file_with_data(
        path, additional_data={"album": "holiday", "rating": 5}
    )

    assert response.is_success
    assert b"holiday" in captured["body"]
    assert b'name="rating"' in captured["body"]


def test_upload_file_from_bytes():
    response = _upload_service(lambda request: httpx.Response(200, json={})).upload_file_from_bytes(
        b"abc", file_name="raw.bin"
    )

    assert response.data.filename == "raw.bin"
    assert response.data.file_size == 3
