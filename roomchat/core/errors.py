# Errors raised by the chat core


class InvalidRequest(Exception):
    # Request rejected before any state was touched; reason goes back to the requester
    pass
