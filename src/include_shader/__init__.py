from .config import IncludeConfig
from .dependency_graph import DependencyGraph, DependencySet
from .directive import IncludeDirective, scan_directives
from .errors import (
    CyclicInclude,
    IncludeError,
    MalformedDirective,
    PathNotFound,
    ReadError,
)
from .expander import Expander, ExpansionResult, expand
from .integration import include_shader, include_shader_result
from .resolver import PathResolver, resolve
from .tracking import DepfileTracker, NullTracker, PathTracker, RecordingTracker
