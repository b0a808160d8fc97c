from rnafoldml.io.writers import BRACKETS, assign_layers, to_dot_string, to_ct_lines, write_dot, write_ct

__all__ = ["BRACKETS", "assign_layers", "to_dot_string", "to_ct_lines", "write_dot", "write_ct"]
