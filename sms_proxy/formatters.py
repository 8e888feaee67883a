from .decoder import AlertEntry

MESSAGE_TEMPLATE = "Title: {title}\nDescription: {description}"


def compose_message(alert: AlertEntry) -> str:
    return MESSAGE_TEMPLATE.format(title=alert.title, description=alert.description)
