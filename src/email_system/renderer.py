"""
Jinja2 template renderer for emails.

This module provides the EmailRenderer class for rendering the HTML email
templates shipped in email_system/templates, plus the
generate_approval_email_html shortcut used for the approval notification.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
from jinja2 import Environment, FileSystemLoader, TemplateNotFound

from settings import EMAIL_TEMPLATES_DIR

APPROVAL_TEMPLATE = 'approval_email.html.jinja'
APPROVAL_SUBJECT = 'Your AlumniCircle account has been approved'


class RendererError(Exception):
    """Base exception for renderer errors."""
    pass


class EmailRenderer:
    """
    Email template renderer using Jinja2.

    Autoescaping is always on: values such as the recipient name come from
    user input and are HTML-escaped before they reach the document.

    Example:
        >>> renderer = EmailRenderer()
        >>> html = renderer.render_approval('Jane Doe', 'https://app.example.com/login')
    """

    def __init__(self, templates_dir: Optional[str] = None):
        """
        Initialize email renderer.

        Args:
            templates_dir: Path to templates directory (defaults to EMAIL_TEMPLATES_DIR from settings)
        """
        self.templates_dir = Path(templates_dir or EMAIL_TEMPLATES_DIR)

        self.jinja_env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True
        )

    def render_file(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template file from the templates directory.

        Args:
            template_name: Template filename (e.g., 'approval_email.html.jinja')
            context: Dictionary with variables to render in template

        Returns:
            str: Rendered template content

        Raises:
            RendererError: If template not found or rendering fails
        """
        try:
            template = self.jinja_env.get_template(template_name)
            return template.render(**context)
        except TemplateNotFound:
            raise RendererError(f"Template not found: {template_name}")
        except Exception as e:
            raise RendererError(f"Failed to render template '{template_name}': {e}")

    def render_approval(self, user_name: str, login_url: str) -> str:
        """Render the account-approval email body."""
        return self.render_file(APPROVAL_TEMPLATE, {
            'user_name': user_name,
            'login_url': login_url,
        })

    def list_templates(self) -> List[str]:
        """
        List all available template files in the templates directory.

        Returns:
            list[str]: Sorted template filenames
        """
        if not self.templates_dir.exists():
            return []

        return sorted(
            f.name
            for f in self.templates_dir.iterdir()
            if f.is_file() and f.suffix == '.jinja'
        )


def generate_approval_email_html(user_name: str, login_url: str) -> str:
    """
    Generate the approval email HTML.

    Example:
        >>> html = generate_approval_email_html('Jane Doe', 'https://app.example.com/login')
        >>> 'Hi Jane Doe,' in html
        True
    """
    return EmailRenderer().render_approval(user_name, login_url)
