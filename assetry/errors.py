class AssetryException(Exception):
    pass


class InvalidIdentifier(AssetryException, ValueError):
    pass


class FrozenStateError(AssetryException, RuntimeError):
    pass


class ManifestReadError(AssetryException):
    def __init__(self, location, reason):
        self.location = location
        self.reason = reason
        super(ManifestReadError, self).__init__(f'Could not read manifest {location}: {reason}')


class OptimizerError(AssetryException):
    pass
