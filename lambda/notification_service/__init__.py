from .telegram import send_telegram_notification, notify_in_background

__all__ = ['send_telegram_notification', 'notify_in_background']
