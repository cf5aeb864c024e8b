"""GitHub handlers: projections, repo creation and the file upsert."""

import base64

GH = "https://api.github.com"
FILE_URL = f"{GH}/repos/BlackRoad-OS/site/contents/docs/index.md"


def test_list_orgs_projects_login_and_url(client, upstream):
    upstream.add(
        "GET",
        f"{GH}/user/orgs",
        [
            {"login": "BlackRoad-OS", "html_url": "https://github.com/BlackRoad-OS", "id": 1, "node_id": "x"},
            {"login": "Other", "html_url": "https://github.com/Other", "id": 2},
        ],
    )
    resp = client.get("/github/orgs")
    assert resp.status_code == 200
    assert resp.json() == [
        {"name": "BlackRoad-OS", "url": "https://github.com/BlackRoad-OS"},
        {"name": "Other", "url": "https://github.com/Other"},
    ]


def test_list_repos_for_org(client, upstream):
    upstream.add(
        "GET",
        f"{GH}/orgs/my-org/repos",
        [{"name": "api", "html_url": "https://github.com/my-org/api", "language": "Python", "stargazers_count": 5}],
    )
    resp = client.get("/github/repos/my-org")
    assert resp.status_code == 200
    assert resp.json() == [{"name": "api", "url": "https://github.com/my-org/api", "language": "Python"}]
    assert upstream.requests[0].url.params["per_page"] == "100"


def test_create_repo_defaults_org(client, upstream):
    upstream.add(
        "POST",
        f"{GH}/orgs/BlackRoad-OS/repos",
        {"name": "new-svc", "html_url": "https://github.com/BlackRoad-OS/new-svc"},
        201,
    )
    resp = client.post("/github/repo", json={"name": "new-svc"})
    assert resp.status_code == 200
    assert resp.json() == {"created": True, "url": "https://github.com/BlackRoad-OS/new-svc", "name": "new-svc"}
    assert upstream.json_body(upstream.requests[0]) == {
        "name": "new-svc",
        "description": "",
        "private": False,
        "auto_init": True,
    }


def test_create_repo_in_given_org(client, upstream):
    upstream.add("POST", f"{GH}/orgs/acme/repos", {"name": "x", "html_url": "u"}, 201)
    resp = client.post("/github/repo", json={"org": "acme", "name": "x", "private": True})
    assert resp.status_code == 200
    assert upstream.json_body(upstream.requests[0])["private"] is True


def test_upsert_creates_file_without_sha(client, upstream):
    # no GET route registered: the lookup answers 404
    upstream.add("PUT", FILE_URL, {"content": {"html_url": "https://github.com/BlackRoad-OS/site/blob/main/docs/index.md"}}, 201)

    resp = client.post("/github/file", json={"repo": "site", "path": "docs/index.md", "content": "# Hello"})
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "url": "https://github.com/BlackRoad-OS/site/blob/main/docs/index.md"}

    assert [r.method for r in upstream.requests] == ["GET", "PUT"]
    body = upstream.json_body(upstream.calls("PUT")[0])
    assert "sha" not in body
    assert body["message"] == "Update via Command Center"
    assert base64.b64decode(body["content"]).decode("utf-8") == "# Hello"


def test_upsert_updates_file_with_fetched_sha(client, upstream):
    upstream.add("GET", FILE_URL, {"sha": "3d21ec53a331a6f037a91c368710b99387d012c1", "type": "file"})
    upstream.add("PUT", FILE_URL, {"content": {"html_url": "https://example/blob"}})

    resp = client.post(
        "/github/file",
        json={"repo": "site", "path": "docs/index.md", "content": "v2", "message": "Bump docs"},
    )
    assert resp.status_code == 200

    body = upstream.json_body(upstream.calls("PUT")[0])
    assert body["sha"] == "3d21ec53a331a6f037a91c368710b99387d012c1"
    assert body["message"] == "Bump docs"


def test_upsert_conflict_is_surfaced_not_retried(client, upstream):
    upstream.add("GET", FILE_URL, {"sha": "stale"})
    upstream.add("PUT", FILE_URL, {"message": "docs/index.md does not match stale"}, 409)

    resp = client.post("/github/file", json={"repo": "site", "path": "docs/index.md", "content": "v3"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "docs/index.md does not match stale"}
    assert len(upstream.calls("PUT")) == 1
    assert len(upstream.calls("GET")) == 1


def test_upsert_requires_repo_and_path(client, upstream):
    resp = client.post("/github/file", json={"content": "x"})
    assert resp.status_code == 422
    assert upstream.requests == []
