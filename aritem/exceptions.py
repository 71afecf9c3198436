#
# (c) Copyright 2021 by Coinkite Inc. This file is covered by license found in COPYING-CC.
#
# Exceptions
#

class DecodeError(ValueError):
    # base58 text could not be turned into a public key
    pass

class InvalidChar(DecodeError):
    def __init__(self, char):
        self.char = char
        super().__init__(f"Invalid base58 char: {char!r}")

class WrongLength(DecodeError):
    def __init__(self, got, expect=32):
        self.got = got
        self.expect = expect
        super().__init__(f"Expected {expect} bytes, got {got}")

class SigningFailure(RuntimeError):
    # key import or the signature operation itself did not work
    pass

class UploadError(RuntimeError):
    # anything that stops us getting an id back from the upload node
    pass

class RemoteRejected(UploadError):
    def __init__(self, status, body_excerpt):
        self.status = status
        self.body_excerpt = body_excerpt
        super().__init__(f"Upload rejected ({status}): {body_excerpt}")

class MalformedResponse(UploadError):
    def __init__(self, msg, body_excerpt=''):
        self.body_excerpt = body_excerpt
        super().__init__(msg)

class NetworkFailure(UploadError):
    pass

# EOF
