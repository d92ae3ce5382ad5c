# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Vocabulary and word-class builder.

Subsystems:
  - corpus: line normalization and word counting
  - selection: vocabulary cap, cutoff, and the unknown bucket
  - partition: ranking and sqrt-frequency class assignment
  - artifacts: writing and verifying the output tables
  - pipeline: the end-to-end build with make-mode skipping
"""
