"""
Low Level representation of jobs, nodes and launch outcomes -- not expected to be user facing.

Used to stabilise contract between the outer scheduling loop, the Policies and the
task runner which actually launches tasks.
"""
