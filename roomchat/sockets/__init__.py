# Sockets package: importing it registers the Socket.IO handlers

from roomchat.sockets import events  # noqa
