import pytest

from pagebundle import create_app

INDEX_HTML = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Dashboard</title>
<script type="module" src="/assets/app.js"></script>
<link rel="stylesheet" href="/assets/app.css">
</head>
<body>
<div id="root"></div>
</body>
</html>
"""


@pytest.fixture
def dist_root(tmp_path):
    """A built frontend: index.html plus one script and one stylesheet."""
    assets = tmp_path / "assets"
    assets.mkdir()
    (tmp_path / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (assets / "app.js").write_text("console.log('ready');", encoding="utf-8")
    (assets / "app.css").write_text("#root { margin: 0; }", encoding="utf-8")
    return tmp_path


@pytest.fixture
def app(dist_root):
    app = create_app({"dist_root": str(dist_root)})
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
