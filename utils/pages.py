"""
Inline templates for the admin console.

render_template_string autoescapes, so guest-supplied text is safe to drop
into the tables and edit forms.
"""
from flask import render_template_string

BOOTSTRAP_CSS = "https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css"

_LAYOUT = """
<html>
  <head>
    <title>{{ title }}</title>
    <link href="{{ css }}" rel="stylesheet">
  </head>
  <body class="container py-4">
    <nav class="mb-4">
      <a href="{{ url_for('admin.bookings') }}" class="btn btn-primary me-2">Bookings</a>
      <a href="{{ url_for('admin.rooms') }}" class="btn btn-success me-2">Rooms</a>
      <a href="{{ url_for('admin.contacts') }}" class="btn btn-info me-2">Contacts</a>
      <a href="{{ url_for('admin.lounge') }}" class="btn btn-warning me-2">Lounge</a>
      <a href="{{ url_for('auth.logout') }}" class="btn btn-danger">Logout</a>
    </nav>
    <h1 class="mb-4">{{ heading }}</h1>
    <div class="table-responsive">
      <table class="table table-striped table-bordered align-middle">
        <thead class="table-dark">
          <tr>{% for h in headers %}<th>{{ h }}</th>{% endfor %}</tr>
        </thead>
        <tbody>
          {% for row in rows %}
          <tr>
            {% for cell in row.cells %}<td>{{ cell }}</td>{% endfor %}
            <td>
              {% for action in row.actions %}
              <form method="{{ action.method }}" action="{{ action.url }}" style="display:inline;"
                    {% if action.confirm %}onsubmit="return confirm('{{ action.confirm }}');"{% endif %}>
                <button type="submit" class="btn btn-sm {{ action.css }}">{{ action.label }}</button>
              </form>
              {% endfor %}
            </td>
          </tr>
          {% else %}
          <tr><td colspan="{{ headers|length }}" class="text-center text-muted">Nothing here yet</td></tr>
          {% endfor %}
        </tbody>
      </table>
    </div>
  </body>
</html>
"""

_LOGIN = """
<html>
  <head>
    <title>Admin Login</title>
    <link href="{{ css }}" rel="stylesheet">
  </head>
  <body class="d-flex justify-content-center align-items-center vh-100 bg-light">
    <div class="card shadow-lg" style="width: 400px;">
      <div class="card-body">
        <h2 class="text-center mb-4">Admin Login</h2>
        {% if error %}<div class="alert alert-danger">{{ error }}</div>{% endif %}
        <form method="POST" action="{{ url_for('auth.login') }}">
          <div class="mb-3"><input type="text" name="username" class="form-control" placeholder="Username" required></div>
          <div class="mb-3"><input type="password" name="password" class="form-control" placeholder="Password" required></div>
          <button type="submit" class="btn btn-primary w-100">Login</button>
        </form>
      </div>
    </div>
  </body>
</html>
"""

_EDIT = """
<html>
  <head><title>{{ title }}</title></head>
  <body style="font-family:Arial; padding:20px;">
    <h2>{{ title }} ID: {{ record_id }}</h2>
    <form method="POST" action="{{ action }}">
      {% for f in fields %}
      <label>{{ f.label }}</label><br/>
      {% if f.type == "textarea" %}
      <textarea name="{{ f.name }}"{% if f.required %} required{% endif %}>{{ f.value }}</textarea><br/><br/>
      {% else %}
      <input type="{{ f.type }}" name="{{ f.name }}" value="{{ f.value }}"{% if f.required %} required{% endif %}/><br/><br/>
      {% endif %}
      {% endfor %}
      <button type="submit">Save Changes</button>
    </form>
    <p><a href="{{ back }}">Back</a></p>
  </body>
</html>
"""

_MESSAGE = """
<html>
  <head><title>{{ heading }}</title></head>
  <body style="font-family:Arial; padding:20px;">
    <h2>{{ heading }}</h2>
    {% if link %}<p><a href="{{ link }}">{{ link_text }}</a></p>{% endif %}
  </body>
</html>
"""


def action(label, url, css="btn-secondary", method="POST", confirm=None):
    return {"label": label, "url": url, "css": css, "method": method, "confirm": confirm}


def field(name, label, value, type="text", required=True):
    return {"name": name, "label": label, "value": "" if value is None else value,
            "type": type, "required": required}


def render_table(title, heading, headers, rows):
    """rows: dicts with "cells" (values) and "actions" (see action())."""
    return render_template_string(
        _LAYOUT, title=title, heading=heading, headers=headers, rows=rows, css=BOOTSTRAP_CSS
    )


def render_login(error=None):
    return render_template_string(_LOGIN, error=error, css=BOOTSTRAP_CSS)


def render_edit(title, record_id, action_url, fields, back_url):
    return render_template_string(
        _EDIT, title=title, record_id=record_id, action=action_url, fields=fields, back=back_url
    )


def render_message(heading, link=None, link_text=None):
    return render_template_string(_MESSAGE, heading=heading, link=link, link_text=link_text)
