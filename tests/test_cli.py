import json

import cli

VALID = {"systemPrompt": "You are a helpful assistant.", "userMessage": "Hello, does this work?", "maxTokens": 100}

def test_cli_demo_from_file(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("MISTRAL_API_KEY", raising=False)
    p = tmp_path / "request.json"
    p.write_text(json.dumps(VALID), encoding="utf-8")

    rc = cli.main([f"@{p}", "--demo"])
    out = capsys.readouterr()

    assert rc == 0
    env = json.loads(out.out)
    assert env["success"] is True
    assert "Hello, does this work?" in env["data"]
    assert "Status Code: 200" in out.err

def test_cli_method_not_allowed(capsys, monkeypatch):
    monkeypatch.delenv("MISTRAL_API_KEY", raising=False)
    rc = cli.main([json.dumps(VALID), "--method", "GET"])
    assert rc == 1
    assert json.loads(capsys.readouterr().out) == {"error": "Method not allowed"}

def test_cli_missing_file(tmp_path):
    assert cli.main([f"@{tmp_path / 'nope.json'}"]) == 2
