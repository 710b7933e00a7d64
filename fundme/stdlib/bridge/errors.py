from fundme.exceptions import Revert, CustomError, IndexOutOfRange, InsufficientContribution, NotOwner

exports = {
    'Revert': Revert,
    'CustomError': CustomError,
    'IndexOutOfRange': IndexOutOfRange,
    'InsufficientContribution': InsufficientContribution,
    'NotOwner': NotOwner,
}
