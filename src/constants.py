"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONNECTION_ERROR = 2
    VERSION_ERROR = 3
    TASK_UNAVAILABLE = 4


class Configurations(Enum):
    """Dependency configurations the GWT artifacts are added to.

    Args:
        Enum (string): Configuration names.
    """

    GWT = "gwt"
    GWT_SDK = "gwtSdk"
    RUNTIME = "runtime"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    EXTENSION_NAME = "gwt"

    # Layout below the build directory
    BUILD_DIR = "gwt"
    OUT_DIR = "out"
    DRAFT_OUT_DIR = "draftOut"
    EXTRA_DIR = "extra"
    WORK_DIR = "work"
    GEN_DIR = "gen"
    CACHE_DIR = "cache"
    LOG_DIR = "log"
    DEV_WAR = "war"
    MAIN_JAVA_DIR = "src/main/java"
    MAIN_RESOURCES_OUTPUT_DIR = "resources/main"

    TASK_COMPILE_GWT = "compileGwt"
    TASK_DRAFT_COMPILE_GWT = "draftCompileGwt"
    TASK_GWT_SUPER_DEV = "gwtSuperDev"
    TASK_COMPILE_JAVA = "compileJava"
    TASK_PROCESS_RESOURCES = "processResources"

    GWT_GROUP = "com.google.gwt"
    GWT_DEV = "gwt-dev"
    GWT_USER = "gwt-user"
    GWT_CODESERVER = "gwt-codeserver"
    GWT_ELEMENTAL = "gwt-elemental"
    GWT_SERVLET = "gwt-servlet"

    # Version floor for the Code Server and Elemental artifacts
    SUPER_DEV_MIN_MAJOR = 2
    SUPER_DEV_MIN_MINOR = 5

    CODE_SERVER_MAIN_CLASS = "com.google.gwt.dev.codeserver.CodeServer"
    JAVA_EXECUTABLE = "java"

    CONFIG_FILES = ["gwtbuild.yml", "gwtbuild.yaml", "gwtbuild.json"]
    ENV_LOG_LEVEL = "GWTBUILD_LOG_LEVEL"
    LOG_FORMAT = "[%(levelname)s] %(message)s"

    MAVEN_REPOSITORY_URL = "https://repo1.maven.org/maven2"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    HTTP_RETRY_MAX = 3
    HTTP_CACHE_TTL_SEC = 300
