"""
starwars/pages.py  ·  landing + add-character HTML
"""
from __future__ import annotations

from jinja2 import Template

TITLE = "Star Wars Characters"

# ────────── shared layout ──────────
_LAYOUT = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <title>{{ title }}{% if subtitle %} · {{ subtitle }}{% endif %}</title>
  <style>
    body { font-family: sans-serif; max-width: 720px; margin: 2rem auto; }
    nav a { margin-right: 1rem; }
    pre { background: #f4f4f4; padding: 1rem; }
    label { display: block; margin-top: .5rem; }
  </style>
</head>
<body>
  <h1>{{ title }}</h1>
  <nav><a href="/">Search</a><a href="/add">Add a character</a><a href="{{ api }}">All (JSON)</a></nav>
  {{ body }}
</body>
</html>
""".strip()

VIEW_BODY = Template("""
<h2>Who are you looking for?</h2>
<form id="search">
  <input id="character-search" placeholder="e.g. yoda" autocomplete="off">
  <button type="submit">Search</button>
</form>
<div id="stats"></div>
<script>
document.getElementById("search").addEventListener("submit", function (event) {
  event.preventDefault();
  var slug = document.getElementById("character-search").value.replace(/\\s+/g, "").toLowerCase();
  fetch("{{ api }}/" + encodeURIComponent(slug))
    .then(function (res) { return res.json(); })
    .then(function (data) {
      var stats = document.getElementById("stats");
      if (data === false) {
        stats.innerHTML = "<p>The force is not strong with this one. No character found.</p>";
        return;
      }
      stats.innerHTML = "<pre>" + JSON.stringify(data, null, 2) + "</pre>";
    });
});
</script>
""".strip())

ADD_BODY = Template("""
<h2>Add a character</h2>
<form id="add">
  <label>Name <input id="name" required></label>
  <label>Role <input id="role"></label>
  <label>Age <input id="age" type="number"></label>
  <label>Force points <input id="force-points" type="number"></label>
  <button type="submit">Add</button>
</form>
<div id="result"></div>
<script>
document.getElementById("add").addEventListener("submit", function (event) {
  event.preventDefault();
  var character = {
    name: document.getElementById("name").value.trim(),
    role: document.getElementById("role").value.trim(),
    age: Number(document.getElementById("age").value),
    forcePoints: Number(document.getElementById("force-points").value)
  };
  fetch("{{ api }}", {
    method: "POST",
    headers: {"Content-Type": "application/json"},
    body: JSON.stringify(character)
  })
    .then(function (res) { return res.json(); })
    .then(function (data) {
      document.getElementById("result").innerHTML =
        "<p>Added! Find them at <a href=\\"{{ api }}/" + data.routeName + "\\">" + data.routeName + "</a></p>";
      document.getElementById("add").reset();
    });
});
</script>
""".strip())

LAYOUT = Template(_LAYOUT)


def render_page(body: Template, *, subtitle: str = "", api: str = "/api/characters") -> str:
    return LAYOUT.render(
        title    = TITLE,
        subtitle = subtitle,
        api      = api,
        body     = body.render(api=api),
    )


def view_page(api: str = "/api/characters") -> str:
    return render_page(VIEW_BODY, api=api)


def add_page(api: str = "/api/characters") -> str:
    return render_page(ADD_BODY, subtitle="Add", api=api)
