# SPDX-FileCopyrightText: 2024 The c64keyboard authors
#
# SPDX-License-Identifier: GPL-3.0-or-later

# Keyboard mapping stages
# host level (not handled here):
# stage 0: capture key down/up from the windowing system, decode the character

# device level:
# stage 1: identify the host key (mackey) and the decoded character
# stage 2: turn the character (symbolic) or the host key (positional) into C64 keys (translate, keymapping)
# stage 3: the matrix driver asserts the row/column lines of each C64 key (not handled here)
