"""Core file organizer modules."""

from .operation_log import OperationKind, OperationRecord, OperationLog, Mechanism
from .classifier import classify, get_extension
from .asset_picker import AssetPicker
from .content_filler import ContentFiller, TEXT_TEMPLATES
from .organizer import DirectoryOrganizer, OrganizeOutcome, RunState
from .populator import DirectoryPopulator, PopulateOutcome
from .reporter import Reporter
from .workspace import list_workspace

__all__ = [
    'OperationKind',
    'OperationRecord',
    'OperationLog',
    'Mechanism',
    'classify',
    'get_extension',
    'AssetPicker',
    'ContentFiller',
    'TEXT_TEMPLATES',
    'DirectoryOrganizer',
    'OrganizeOutcome',
    'RunState',
    'DirectoryPopulator',
    'PopulateOutcome',
    'Reporter',
    'list_workspace',
]
