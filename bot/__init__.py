"""Bot package for PhotoBot.

This package contains the Telegram bot implementation: it listens for text
messages, answers the /start and /about commands, and relays photos found on
Flickr for every other text back to the chat it came from.
"""
