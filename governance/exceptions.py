class GovernanceError(Exception):
    """Base class for errors raised by the governance client itself."""


class PreconditionError(GovernanceError):
    """
    Raised by the proposal builder when the current on-chain state makes an action pointless.
    Nothing has been appended to the builder when this is raised.
    """

    def __init__(self, account: str, message: str):
        super().__init__(message)
        self.account = account


class AlreadyDeployer(PreconditionError):
    def __init__(self, account: str):
        super().__init__(account, f"Account {account} is already a deployer")


class NotDeployer(PreconditionError):
    def __init__(self, account: str):
        super().__init__(account, f"Account {account} is not a deployer")


class AlreadyValidator(PreconditionError):
    def __init__(self, account: str):
        super().__init__(account, f"Account {account} is already a validator")


class NotValidator(PreconditionError):
    def __init__(self, account: str):
        super().__init__(account, f"Account {account} is not a validator")
