from sysfetch.internal.constants import OS_RELEASE_ID_PREFIX, UNKNOWN_DISTRO


def detect_distribution(os_release_text: str) -> str:
    """
    Extract the distribution id from os-release style text.

    The first line starting with 'ID=' wins, surrounding double quotes are
    stripped. Returns UNKNOWN_DISTRO when there is no such line, which also
    covers an "Error: ..." string from a failed read.
    """
    for line in os_release_text.split("\n"):
        if line.startswith(OS_RELEASE_ID_PREFIX):
            return line.split("=")[1].strip('"')
    return UNKNOWN_DISTRO
