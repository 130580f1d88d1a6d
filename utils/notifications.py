"""
Notifications Module - Fire-and-forget Telegram forwarding of contact messages
"""

import html
import threading
import requests
from flask import current_app


def get_telegram_credentials():
    """Return (bot_token, chat_id) from config, or (None, None) when not configured"""
    bot_token = current_app.config.get('CONTACT_TELEGRAM_BOT_TOKEN')
    chat_id = current_app.config.get('CONTACT_TELEGRAM_CHAT_ID')
    if not (bot_token and chat_id):
        return None, None
    return bot_token, chat_id


def format_contact_message(contact):
    """Render a contact submission as a Telegram HTML message"""
    body = contact['message']
    return (
        f"📧 <b>New Portfolio Message</b>\n\n"
        f"👤 <b>From:</b> {html.escape(contact['name'])}\n"
        f"📧 <b>Email:</b> {html.escape(contact['email'])}\n"
        f"📌 <b>Subject:</b> {html.escape(contact['subject'])}\n"
        f"💬 <b>Message:</b>\n{html.escape(body[:500])}{'...' if len(body) > 500 else ''}"
    )


def _post_telegram(url, payload, logger):
    try:
        response = requests.post(url, json=payload, timeout=10)
        if response.status_code == 200:
            logger.info("Contact Telegram notification sent")
        else:
            logger.error(f"Telegram API error: {response.status_code}")
    except requests.RequestException as e:
        logger.error(f"Telegram notification error: {str(e)}")


def send_contact_notification(contact):
    """
    Forward a contact submission to Telegram on a background thread

    Args:
        contact (dict): name, email, subject and message of the submission

    Returns:
        bool: True if a notification was dispatched, False when not configured
    """
    bot_token, chat_id = get_telegram_credentials()
    if not (bot_token and chat_id):
        current_app.logger.debug("Contact Telegram credentials not configured")
        return False

    url = f"https://api.telegram.org/bot{bot_token}/sendMessage"
    payload = {
        'chat_id': chat_id,
        'text': format_contact_message(contact),
        'parse_mode': 'HTML'
    }
    thread = threading.Thread(target=_post_telegram,
                              args=(url, payload, current_app.logger))
    thread.daemon = True
    thread.start()
    return True


__all__ = [
    'get_telegram_credentials',
    'format_contact_message',
    'send_contact_notification'
]
