"""
┌────────────────────────────────────────┐
│ Errors raised while taking screenshots │
└────────────────────────────────────────┘

 None of these are recovered locally: the command line script turns
 them into a message and an exit status.

 October 2026
"""

class Screenshot_Error(Exception):
    pass


class Missing_Address(Screenshot_Error):
    def __init__(self):
        super().__init__("Missing address")


# ┌────────────────────────────────────────┐
# │ Transport                              │
# └────────────────────────────────────────┘

class Connect_Failed(Screenshot_Error):
    def __init__(self, address, reason=None):
        self.address = address
        self.reason  = reason

        msg = f"Failed to connect to {address}"
        if reason is not None: msg += f" ({reason})"
        super().__init__(msg)


class Receive_Failed(Screenshot_Error):
    action = "receive message from"

    def __init__(self, address, reason=None):
        self.address = address
        self.reason  = reason

        msg = f"Failed to {self.action} {address}"
        if reason is not None: msg += f" ({reason})"
        super().__init__(msg)


class Send_Failed(Receive_Failed):
    action = "send message to"


# ┌────────────────────────────────────────┐
# │ Plugin selection                       │
# └────────────────────────────────────────┘

class Identity_Unavailable(Screenshot_Error):
    def __init__(self, address):
        self.address = address
        super().__init__(f"Unable to retrieve instrument ID from {address}")


class No_Plugin_Detected(Screenshot_Error):
    def __init__(self, identity):
        self.identity = identity
        super().__init__(
            f"Could not autodetect which screenshot plugin to use for {identity!r}"
            " - please specify plugin name manually"
        )


class Unknown_Plugin(Screenshot_Error):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown plugin name {name!r}")


# ┌────────────────────────────────────────┐
# │ Registry                               │
# └────────────────────────────────────────┘

class Registry_Error(Screenshot_Error):
    pass


class Registry_Full(Registry_Error):
    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"Screenshot plugin list full ({capacity} plugins)")


class Duplicate_Plugin(Registry_Error):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Screenshot plugin {name!r} is already registered")


# ┌────────────────────────────────────────┐
# │ Output                                 │
# └────────────────────────────────────────┘

class File_Write_Failed(Screenshot_Error):
    def __init__(self, path, reason=None):
        self.path   = path
        self.reason = reason

        msg = f"Could not write screenshot file {str(path)}"
        if reason is not None: msg += f" ({reason})"
        super().__init__(msg)
