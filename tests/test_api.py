from fastapi.testclient import TestClient

from api import create_app


client = TestClient(create_app())


def test_analyze(laravel_project):
	resp = client.post("/analyze", json={"root_path": str(laravel_project)})
	assert resp.status_code == 200
	body = resp.json()
	assert [n["id"] for n in body["graph"]["nodes"]] == [r"App\Models\Comment", r"App\Models\Post", r"App\User"]
	post = body["graph"]["nodes"][1]
	assert post["label"] == "Post"
	assert post["path"].endswith("Post.php")
	assert post["title"] == f"Path: {post['path']}"
	assert {"from": r"App\User", "to": r"App\Models\Post", "label": "posts", "title": "Type: hasMany"} in body["graph"]["edges"]
	assert body["summary"]["message"] is None


def test_analyze_empty_project(tmp_path):
	resp = client.post("/analyze", json={"root_path": str(tmp_path)})
	assert resp.status_code == 200
	body = resp.json()
	assert body["graph"] == {"nodes": [], "edges": []}
	assert body["summary"]["message"].startswith("No models found")


def test_analyze_invalid_root(tmp_path):
	resp = client.post("/analyze", json={"root_path": str(tmp_path / "missing")})
	assert resp.status_code == 400


def test_source(laravel_project):
	path = laravel_project / "app/Models/Post.php"
	resp = client.get("/source", params={"path": str(path)})
	assert resp.status_code == 200
	body = resp.json()
	assert body["content"] == path.read_text(encoding="utf-8")
	assert body["total_lines"] == len(body["content"].splitlines())


def test_source_errors(tmp_path):
	assert client.get("/source", params={"path": str(tmp_path / "x.php")}).status_code == 404
	notes = tmp_path / "notes.txt"
	notes.write_text("hi")
	assert client.get("/source", params={"path": str(notes)}).status_code == 400
