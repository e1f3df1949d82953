# SPDX-FileCopyrightText: 2024 The c64keyboard authors
#
# SPDX-License-Identifier: GPL-3.0-or-later
