import json

from cli import main


def test_analyze_prints_graph(laravel_project, capsys):
	assert main(["analyze", str(laravel_project)]) == 0
	payload = json.loads(capsys.readouterr().out)
	assert [n["label"] for n in payload["nodes"]] == ["Comment", "Post", "User"]
	assert len(payload["edges"]) == 4
	assert set(payload["edges"][0]) == {"from", "to", "label", "title"}


def test_analyze_writes_output_and_summary(laravel_project, tmp_path, capsys):
	out = tmp_path / "graph.json"
	assert main(["analyze", str(laravel_project), "-o", str(out), "--summary", "--workers", "2"]) == 0
	payload = json.loads(out.read_text(encoding="utf-8"))
	assert len(payload["nodes"]) == 3
	err = capsys.readouterr().err
	assert "3 models, 4 relationships" in err
	assert r"posts: hasMany -> App\Models\Post" in err


def test_analyze_missing_root(tmp_path):
	assert main(["analyze", str(tmp_path / "missing")]) == 2
