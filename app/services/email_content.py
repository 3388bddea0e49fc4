from html import escape
from typing import Any

from app.models.quote_request import QuoteRequest, display_text
from app.models.response import EmailContent

PLACEHOLDER = "—"
BRAND = "MrClean"
FOOTER = "Cet e-mail a été envoyé automatiquement par notre simulateur."


def value_or_dash(value: Any) -> str:
    if value is None:
        return PLACEHOLDER
    text = display_text(value).strip()
    return text or PLACEHOLDER


def list_or_dash(values: Any) -> str:
    if not isinstance(values, (list, tuple)) or not values:
        return PLACEHOLDER
    items = [display_text(item).strip() for item in values if item is not None]
    joined = ", ".join(item for item in items if item)
    return joined or PLACEHOLDER


def action_label(action_type: str) -> str:
    return "réservation de créneau" if action_type == "creneau" else "demande de devis"


def build_subject(request: QuoteRequest) -> str:
    if request.subject and request.subject.strip():
        return request.subject.strip()
    if request.action_type == "creneau":
        return f"Confirmation de réservation — {BRAND}"
    return f"Confirmation de devis — {BRAND}"


def _summary_fields(request: QuoteRequest) -> dict:
    totals = request.totals
    return {
        "spaces": list_or_dash(request.spaces),
        "days_per_week": value_or_dash(request.days_per_week),
        "hours_per_day": value_or_dash(request.hours_per_day),
        "postal_city": value_or_dash(request.postal_city),
        "estimate": value_or_dash(totals.estimate_eur_text),
        "week": value_or_dash(totals.week_eur_text),
        "month": value_or_dash(totals.month_eur_text),
    }


def build_text_body(request: QuoteRequest) -> str:
    if request.summary and request.summary.strip():
        return request.summary.strip()

    fields = _summary_fields(request)
    return "\n".join([
        "Bonjour,",
        "",
        f"Merci pour votre {action_label(request.action_type)}.",
        "Voici votre récapitulatif :",
        "",
        f"Espaces : {fields['spaces']}",
        f"Jours/semaine : {fields['days_per_week']}",
        f"Heures/jour : {fields['hours_per_day']}",
        f"Ville/CP : {fields['postal_city']}",
        "",
        f"Montant estimé : {fields['estimate']}",
        f"Total TTC / semaine : {fields['week']}",
        f"Total TTC / mois : {fields['month']}",
        "",
        PLACEHOLDER,
        FOOTER,
    ])


def build_html_body(request: QuoteRequest, subject: str) -> str:
    """
    Return the HTML part of the email.

    A non-blank ``html`` override is sent untouched. Otherwise the summary is
    rendered as a standalone document where every interpolated value goes
    through ``html.escape`` (quotes included).
    """
    if isinstance(request.html, str) and request.html.strip():
        return request.html

    fields = {key: escape(value, quote=True) for key, value in _summary_fields(request).items()}
    title = escape(subject, quote=True)
    label = escape(action_label(request.action_type), quote=True)

    return f"""<!doctype html>
<html lang="fr"><meta charset="utf-8">
<body style="margin:0;padding:0;background:#0b0c10;">
  <div style="font-family:system-ui,-apple-system,Segoe UI,Roboto,Arial;line-height:1.6;color:#0f172a;background:#ffffff;padding:24px;">
    <h2 style="margin:0 0 12px">{title}</h2>
    <p style="margin:0 0 8px">Bonjour,</p>
    <p style="margin:0 0 12px">
      Merci pour votre {label}. Voici votre récapitulatif :
    </p>
    <ul style="margin:0 0 12px;padding-left:20px">
      <li><strong>Espaces :</strong> {fields['spaces']}</li>
      <li><strong>Jours / semaine :</strong> {fields['days_per_week']}</li>
      <li><strong>Heures / jour :</strong> {fields['hours_per_day']}</li>
      <li><strong>Ville / CP :</strong> {fields['postal_city']}</li>
    </ul>
    <p style="margin:12px 0 4px"><strong>Montants estimés</strong></p>
    <ul style="margin:0 0 12px;padding-left:20px">
      <li>Montant estimé : <strong>{fields['estimate']}</strong></li>
      <li>Total TTC / semaine : <strong>{fields['week']}</strong></li>
      <li>Total TTC / mois : <strong>{fields['month']}</strong></li>
    </ul>
    <p style="color:#64748b;font-size:13px;margin:16px 0 0">{FOOTER}</p>
  </div>
</body></html>"""


def build_email_content(request: QuoteRequest) -> EmailContent:
    subject = build_subject(request)
    return EmailContent(
        subject=subject,
        text=build_text_body(request),
        html=build_html_body(request, subject),
    )
