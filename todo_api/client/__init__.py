"""Client view for the to-do page.

- api.py: HTTP clients for the Todo API and the quote service
- poller.py: cancellable periodic task
- view.py: page state and user actions
"""
