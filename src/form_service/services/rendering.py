"""Template rendering interface and built-in pages."""

from typing import Protocol


class TemplateRenderer(Protocol):
    """Renders a template body with variable bindings."""

    def render(self, template_body: str, bindings: dict[str, object]) -> str:
        """Return the rendered template as a string."""


def render_success_page(renderer: TemplateRenderer, submission_id: str) -> str:
    """Render the self-closing confirmation page shown after a dynamic form."""
    return renderer.render(SUCCESS_PAGE_TEMPLATE, {"submissionId": submission_id})


SUCCESS_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>Form Submitted Successfully</title>
    <style>
      body {
        font-family: system-ui, -apple-system, sans-serif;
        display: flex;
        align-items: center;
        justify-content: center;
        height: 100vh;
        margin: 0;
        background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
      }
      .success-container {
        text-align: center;
        background: white;
        padding: 3rem;
        border-radius: 1rem;
        box-shadow: 0 20px 60px rgba(0, 0, 0, 0.3);
        max-width: 500px;
      }
      .success-icon { font-size: 4rem; color: #10b981; margin-bottom: 1rem; }
      h1 { color: #1f2937; margin-bottom: 0.5rem; }
      p { color: #6b7280; margin-bottom: 2rem; }
      .submission-id {
        background: #f3f4f6;
        padding: 0.75rem;
        border-radius: 0.5rem;
        font-family: monospace;
        font-size: 0.875rem;
        color: #374151;
        margin-bottom: 1.5rem;
      }
      button {
        background: #667eea;
        color: white;
        border: none;
        padding: 0.75rem 2rem;
        border-radius: 0.5rem;
        font-size: 1rem;
        cursor: pointer;
      }
      button:hover { background: #5568d3; }
    </style>
    <script>
      setTimeout(function () {
        window.close();
      }, 5000);
    </script>
  </head>
  <body>
    <div class="success-container">
      <div class="success-icon">&#10003;</div>
      <h1>Form Submitted Successfully!</h1>
      <p>Your form has been submitted and the flow will continue automatically.</p>
      <div class="submission-id">Submission ID: {{ submissionId | e }}</div>
      <p style="font-size: 0.875rem; color: #9ca3af;">
        This window will close automatically in 5 seconds...
      </p>
      <button onclick="window.close()">Close Window</button>
    </div>
  </body>
</html>
"""
