# *-* coding: utf-8 *-*
import enum

from sepa.errors import InvalidCommand


class Command(enum.Enum):
    DOWNLOAD_FILE = 'DownloadFile'
    DOWNLOAD_FILE_LIST = 'DownloadFileList'
    GET_USER_INFO = 'GetUserInfo'
    UPLOAD_FILE = 'UploadFile'

    @property
    def template_name(self) -> str:
        """File name of the xml skeleton, e.g. ``download_file.xml``."""
        return self.name.lower() + '.xml'

    @classmethod
    def coerce(cls, value) -> 'Command':
        """
        Resolve a command given as a member, its CamelCase name or its snake_case name.

        Parameters:
            value: Command, 'DownloadFile' or 'download_file'.

        Returns:
            The matching Command member.

        Raises:
            InvalidCommand: the value names no supported command.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for command in cls:
                if value in (command.value, command.name.lower()):
                    return command
        raise InvalidCommand('unsupported command: %r' % (value,))


class Presence(enum.Enum):
    ALWAYS = 'always'
    REQUIRED = 'required'
    OPTIONAL_PAIR = 'optional pair'
    ABSENT = 'absent'


# element name -> request parameter carrying its value
FIELDS = {
    'CustomerId': 'customer_id',
    'Command': 'command',
    'Timestamp': None,
    'StartDate': 'start_date',
    'EndDate': 'end_date',
    'Status': 'status',
    'Environment': 'environment',
    'FileReference': 'file_reference',
    'TargetId': 'target_id',
    'SoftwareId': None,
    'FileType': 'file_type',
    'Content': 'content',
}

_HEADER = ('CustomerId', 'Command', 'Timestamp', 'Environment', 'SoftwareId')

_POLICY = {
    Command.DOWNLOAD_FILE: {
        'Status': Presence.REQUIRED,
        'TargetId': Presence.REQUIRED,
        'FileType': Presence.REQUIRED,
        'FileReference': Presence.REQUIRED,
        'StartDate': Presence.OPTIONAL_PAIR,
        'EndDate': Presence.OPTIONAL_PAIR,
    },
    Command.DOWNLOAD_FILE_LIST: {
        'Status': Presence.REQUIRED,
        'TargetId': Presence.REQUIRED,
        'FileType': Presence.REQUIRED,
        'StartDate': Presence.OPTIONAL_PAIR,
        'EndDate': Presence.OPTIONAL_PAIR,
    },
    Command.GET_USER_INFO: {},
    Command.UPLOAD_FILE: {
        'FileType': Presence.REQUIRED,
        'Content': Presence.REQUIRED,
    },
}


def field_policy(command: Command) -> dict[str, Presence]:
    """
    Presence of every application request element for a command.

    The result covers all names in FIELDS; anything a command does not
    use is reported as Presence.ABSENT and must not appear in the document.
    """
    policy = {name: Presence.ABSENT for name in FIELDS}
    policy.update({name: Presence.ALWAYS for name in _HEADER})
    policy.update(_POLICY[command])
    return policy
