"""Minimal single-page wizard served at the site root."""

from html import escape

from brickpress.domain.themes import RANDOM_THEME_LABEL, THEME_LABELS

_PAGE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>BrickPress</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; max-width: 40rem; }
      .row { margin-bottom: 1rem; }
      .step { display: none; }
      .step.active { display: block; }
      input, textarea, select { padding: 0.4rem 0.6rem; width: 100%; box-sizing: border-box; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      img { max-width: 100%; }
      #error { color: #b00020; }
      #gallery img { width: 120px; margin: 0.25rem; }
    </style>
  </head>
  <body>
    <h1>BrickPress</h1>
    <p>Turn your brick creations into professional posters.</p>
    <div class="row">
      <label>Access token</label><br />
      <input id="token" type="password" placeholder="Session access token" />
    </div>

    <section id="step1" class="step active">
      <div class="row"><input id="image" type="file" accept="image/*" capture="environment" /></div>
      <div class="row"><input id="name" placeholder="Set name" /></div>
      <div class="row"><textarea id="description" placeholder="Describe your creation"></textarea></div>
      <button onclick="next()">Next</button>
    </section>

    <section id="step2" class="step">
      <div class="row">
        <select id="theme">
          <!-- theme-options -->
        </select>
      </div>
      <button id="generate" onclick="generate()">Generate Poster</button>
    </section>

    <section id="step3" class="step">
      <div class="row"><img id="result" alt="Generated poster" /></div>
      <button onclick="createAnother()">Create Another</button>
      <a id="download" download="brickpress-poster.png">Download</a>
    </section>

    <p id="error"></p>
    <button onclick="loadGallery()">My creations</button>
    <div id="gallery"></div>

    <script>
      function show(step) {
        for (const n of [1, 2, 3]) {
          document.getElementById('step' + n).classList.toggle('active', n === step);
        }
      }
      function authHeaders() {
        const token = document.getElementById('token').value;
        return token ? { 'Authorization': 'Bearer ' + token } : {};
      }
      function next() {
        const error = document.getElementById('error');
        if (!document.getElementById('token').value) {
          error.textContent = 'Please sign in first.';
          return;
        }
        if (!document.getElementById('image').files[0] || !document.getElementById('name').value) {
          return;
        }
        error.textContent = '';
        show(2);
      }
      async function generate() {
        const button = document.getElementById('generate');
        const error = document.getElementById('error');
        const theme = document.getElementById('theme').value;
        const form = new FormData();
        form.append('image', document.getElementById('image').files[0]);
        form.append('name', document.getElementById('name').value);
        form.append('description', document.getElementById('description').value);
        form.append('theme', theme);
        form.append('modelType', 'unknown');
        form.append('useOriginalPrompt', theme ? 'false' : 'true');
        button.disabled = true;
        button.textContent = 'Generating...';
        error.textContent = '';
        try {
          const res = await fetch('/api/generate', { method: 'POST', body: form, headers: authHeaders() });
          const data = await res.json();
          if (!res.ok) {
            error.textContent = data.error || 'Failed to generate poster.';
            return;
          }
          document.getElementById('result').src = data.image;
          document.getElementById('download').href = data.image;
          show(3);
        } finally {
          button.disabled = false;
          button.textContent = 'Generate Poster';
        }
      }
      function createAnother() {
        for (const id of ['image', 'name', 'description', 'theme']) {
          document.getElementById(id).value = '';
        }
        document.getElementById('result').removeAttribute('src');
        document.getElementById('error').textContent = '';
        show(1);
      }
      async function loadGallery() {
        const res = await fetch('/api/generations', { headers: authHeaders() });
        const data = await res.json();
        const gallery = document.getElementById('gallery');
        gallery.innerHTML = '';
        for (const item of data.generations || []) {
          const img = document.createElement('img');
          img.src = item.imageUrl || '';
          img.alt = item.name;
          img.title = item.name + ' (' + item.theme + ')';
          gallery.appendChild(img);
        }
      }
    </script>
  </body>
</html>
"""


def _theme_options() -> str:
    options = [(theme.value, label) for theme, label in THEME_LABELS.items()]
    return "\n".join(
        f'          <option value="{escape(value)}">{escape(label)}</option>'
        for value, label in [("", RANDOM_THEME_LABEL), *options]
    ).lstrip()


INDEX_HTML = _PAGE.replace("<!-- theme-options -->", _theme_options())
