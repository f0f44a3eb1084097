from sundries.objects.clone import clone as clone
from sundries.objects.compare import compare as compare
from sundries.objects.entries import (
    entries as entries,
    keys as keys,
    own_items as own_items,
    values as values,
)
from sundries.objects.merge import merge as merge
from sundries.objects.select import (
    defaults as defaults,
    omit as omit,
    pick as pick,
)
from sundries.objects.transform import transform_keys as transform_keys
