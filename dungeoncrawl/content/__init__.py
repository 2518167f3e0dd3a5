"""Game content: events, items and weapons."""