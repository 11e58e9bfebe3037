"""
Email templates for account verification and password reset.

Both emails share one dark-themed layout; only the heading, the intro
sentence, the button label, the link lifetime and the footer note differ.
Rendering is pure: no settings, no I/O.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from html import escape
from typing import Optional

from src.models.email import EmailTemplate


BRAND_NAME = "AI Hair Simulation"


@dataclass(frozen=True)
class RenderedEmail:
    """Subject plus both bodies of one email."""
    subject: str
    text: str
    html: str


@dataclass(frozen=True)
class _TemplateCopy:
    subject: str
    heading: str
    intro: str
    button_label: str
    ignore_note: str


_COPY = {
    EmailTemplate.VERIFY_EMAIL: _TemplateCopy(
        subject=f"Verify Your Email - {BRAND_NAME}",
        heading="Verify Your Email",
        intro=(
            f"Thanks for signing up for {BRAND_NAME}! "
            "Please confirm your email address to activate your account."
        ),
        button_label="Verify Email",
        ignore_note=(
            "If you didn't create an account, you can safely ignore this email."
        ),
    ),
    EmailTemplate.RESET_PASSWORD: _TemplateCopy(
        subject=f"Reset Your Password - {BRAND_NAME}",
        heading="Reset Your Password",
        intro=(
            "We received a request to reset your password for your "
            f"{BRAND_NAME} account. Use the link below to set a new password."
        ),
        button_label="Reset Password",
        ignore_note=(
            "If you didn't request this password reset, you can safely ignore "
            "this email. Your password will remain unchanged."
        ),
    ),
}


_HTML_LAYOUT = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{heading}</title>
</head>
<body style="margin: 0; padding: 0; background-color: #000000; font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Arial, sans-serif;">
  <table role="presentation" style="width: 100%; border-collapse: collapse;">
    <tr>
      <td align="center" style="padding: 40px 20px;">
        <table role="presentation" style="max-width: 600px; width: 100%; border-collapse: collapse;">
          <tr>
            <td style="padding: 32px; background-color: #111111; border: 1px solid #333333; border-radius: 8px 8px 0 0;">
              <h1 style="margin: 0; color: #ffffff; font-size: 24px; font-weight: 600; text-align: center;">{brand}</h1>
            </td>
          </tr>
          <tr>
            <td style="padding: 32px; background-color: #111111; border-left: 1px solid #333333; border-right: 1px solid #333333;">
              <h2 style="margin: 0 0 16px; color: #ffffff; font-size: 20px; font-weight: 600;">{heading}</h2>
              <p style="margin: 0 0 16px; color: #cccccc; font-size: 16px; line-height: 1.5;">Hi {name},</p>
              <p style="margin: 0 0 24px; color: #cccccc; font-size: 16px; line-height: 1.5;">{intro}</p>
              <table role="presentation" style="width: 100%; border-collapse: collapse;">
                <tr>
                  <td align="center" style="padding: 16px 0;">
                    <a href="{link}" style="display: inline-block; padding: 14px 32px; background-color: #ffffff; color: #000000; text-decoration: none; font-size: 16px; font-weight: 600; border-radius: 8px;">{button_label}</a>
                  </td>
                </tr>
              </table>
              <p style="margin: 24px 0 0; color: #999999; font-size: 14px; line-height: 1.5;">
                This link will expire in <strong style="color: #ffffff;">{expiry}</strong>.
              </p>
              <p style="margin: 16px 0 0; color: #999999; font-size: 14px; line-height: 1.5;">
                If you can't click the button, copy and paste this link into your browser:
              </p>
              <p style="margin: 8px 0 0; color: #666666; font-size: 12px; word-break: break-all;">{link}</p>
            </td>
          </tr>
          <tr>
            <td style="padding: 24px 32px; background-color: #0a0a0a; border: 1px solid #333333; border-top: none; border-radius: 0 0 8px 8px;">
              <p style="margin: 0; color: #666666; font-size: 12px; line-height: 1.5; text-align: center;">{ignore_note}</p>
              <p style="margin: 16px 0 0; color: #444444; font-size: 11px; text-align: center;">&copy; {year} {brand}. All rights reserved.</p>
            </td>
          </tr>
        </table>
      </td>
    </tr>
  </table>
</body>
</html>
"""


_TEXT_LAYOUT = """{heading}

Hi {name},

{intro}

{link}

This link will expire in {expiry}.

{ignore_note}

- {brand} Team
"""


def _greeting_name(display_name: Optional[str]) -> str:
    if display_name and display_name.strip():
        return display_name.strip()
    return "there"


def render_email(
    template: EmailTemplate,
    link: str,
    display_name: Optional[str] = None,
    year: Optional[int] = None,
) -> RenderedEmail:
    """
    Render subject, plain-text and HTML bodies for a template.

    The link is stated in both bodies, along with the template's
    link lifetime. User-supplied values are HTML-escaped in the HTML body.
    """
    copy = _COPY[template]
    name = _greeting_name(display_name)
    year = year or datetime.now(timezone.utc).year

    text = _TEXT_LAYOUT.format(
        heading=copy.heading,
        name=name,
        intro=copy.intro,
        link=link,
        expiry=template.expiry_text,
        ignore_note=copy.ignore_note,
        brand=BRAND_NAME,
    )
    html = _HTML_LAYOUT.format(
        heading=escape(copy.heading),
        brand=escape(BRAND_NAME),
        name=escape(name),
        intro=escape(copy.intro),
        link=escape(link, quote=True),
        button_label=escape(copy.button_label),
        expiry=template.expiry_text,
        ignore_note=escape(copy.ignore_note),
        year=year,
    )
    return RenderedEmail(subject=copy.subject, text=text, html=html)


def render_verification_email(link: str, display_name: Optional[str] = None) -> RenderedEmail:
    return render_email(EmailTemplate.VERIFY_EMAIL, link, display_name)


def render_password_reset_email(link: str, display_name: Optional[str] = None) -> RenderedEmail:
    return render_email(EmailTemplate.RESET_PASSWORD, link, display_name)
