"""Fields – descriptors used to target custom randomizers and exclusions."""
from mp_populator.fields.descriptor import FieldDescriptor, FieldDescriptorBuilder, field

__all__ = ["FieldDescriptor", "FieldDescriptorBuilder", "field"]
