# ---- Templates (embedded) ----
TPL_LOGIN = """
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width,initial-scale=1">
  <title>Login</title>
  <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.2/dist/css/bootstrap.min.css" rel="stylesheet">
  <link href="{{ url_for('static', filename='style.css') }}" rel="stylesheet">
</head>
<body>
  <div class="auth-card">
    <h3 class="mb-2">File Manager</h3>
    <p class="muted mb-4">Sign in with your username and password</p>
    <form method="post" action="{{ url_for('login') }}">
      <div class="mb-3">
        <label class="form-label" for="username">Username</label>
        <input id="username" name="username" class="form-control" required autofocus>
      </div>
      <div class="mb-3">
        <label class="form-label" for="password">Password</label>
        <input id="password" name="password" type="password" class="form-control" required>
      </div>
      <button type="submit" class="btn btn-primary">Sign in</button>
    </form>
  </div>
</body>
</html>
"""

TPL_INDEX = """
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width,initial-scale=1">
  <title>File Manager</title>
  <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.2/dist/css/bootstrap.min.css" rel="stylesheet">
  <link href="{{ url_for('static', filename='style.css') }}" rel="stylesheet">
</head>
<body>
<div class="container">
  <div class="app-card">
    <div class="d-flex justify-content-between align-items-center mb-3">
      <h4>File Manager</h4>
      <a href="{{ url_for('logout') }}" class="btn btn-sm btn-outline-secondary">Logout</a>
    </div>
    <form method="get" action="{{ url_for('index') }}" class="d-flex gap-2 mb-3">
      <input type="hidden" name="dir" value="{{ relative_dir }}">
      <input type="text" name="q" class="form-control" placeholder="Search files..." value="{{ query }}">
      <button type="submit" class="btn btn-primary">Search</button>
    </form>
    <div class="muted-sm mb-2">/{{ relative_dir }}</div>
    <ul class="list-unstyled">
      {% if relative_dir %}
        <li class="item-row"><a href="{{ url_for('index', dir=parent_dir) }}">⬅️ Back</a></li>
      {% endif %}
      {% for it in entries %}
        <li class="item-row">
          {% if it.is_dir %}
            📁 <a class="folder" href="{{ url_for('index', dir=it.rel) }}">{{ it.name }}</a>
          {% else %}
            📄 <a class="file" href="{{ url_for('view_file', filename=it.rel) }}">{{ it.name }}</a>
            <a class="btn btn-sm btn-outline-success" href="{{ url_for('share_file', filename=it.rel) }}">Share</a>
          {% endif %}
        </li>
      {% else %}
        <li class="muted">Empty directory</li>
      {% endfor %}
    </ul>
  </div>
</div>
</body>
</html>
"""

TPL_SHARED = """File shared! Access it at: <a href="{{ link }}">{{ link }}</a>"""
