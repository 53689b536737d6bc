"""Static landing page for manual testing."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["landing"])


@router.get("/", response_class=HTMLResponse)
async def landing_page() -> HTMLResponse:
    """Minimal page with forms that call the JSON API."""
    return HTMLResponse(_LANDING_HTML)


_LANDING_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Exercise Tracker</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      form { margin-bottom: 1.5rem; }
      input { display: block; padding: 0.4rem 0.6rem; margin: 0.3rem 0; width: 320px; }
      button { padding: 0.4rem 0.8rem; }
      pre { background: #f6f6f6; padding: 1rem; overflow: auto; }
    </style>
  </head>
  <body>
    <h1>Exercise Tracker</h1>
    <form id="user-form">
      <h2>Create a New User</h2>
      <input id="username" placeholder="username" required />
      <button type="submit">Submit</button>
    </form>
    <form id="exercise-form">
      <h2>Add exercises</h2>
      <input id="uid" placeholder=":_id" required />
      <input id="description" placeholder="description*" required />
      <input id="duration" placeholder="duration* (mins.)" required />
      <input id="date" placeholder="date (yyyy-mm-dd)" />
      <button type="submit">Submit</button>
    </form>
    <p>GET user's exercise log: <code>GET /api/users/:_id/logs?[from][&amp;to][&amp;limit]</code></p>
    <pre id="output">Ready.</pre>
    <script>
      async function send(path, payload) {
        const output = document.getElementById('output');
        output.textContent = 'Loading...';
        const res = await fetch(path, {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(payload)
        });
        const data = await res.json();
        output.textContent = JSON.stringify(data, null, 2);
      }
      document.getElementById('user-form').addEventListener('submit', (event) => {
        event.preventDefault();
        send('/api/users', { username: document.getElementById('username').value });
      });
      document.getElementById('exercise-form').addEventListener('submit', (event) => {
        event.preventDefault();
        const uid = document.getElementById('uid').value;
        send('/api/users/' + encodeURIComponent(uid) + '/exercises', {
          description: document.getElementById('description').value,
          duration: document.getElementById('duration').value,
          date: document.getElementById('date').value
        });
      });
    </script>
  </body>
</html>
"""
