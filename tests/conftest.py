"""Shared CSV payloads for Treasury curve tests"""

import pytest

NEW_CSV_DATA = """Date,"1 Mo","2 Mo","3 Mo","4 Mo","6 Mo","1 Yr","2 Yr","3 Yr","5 Yr","7 Yr","10 Yr","20 Yr","30 Yr"
07/07/2023,5.32,5.47,5.46,5.52,5.53,5.41,4.94,4.64,4.35,4.23,4.06,4.27,4.05
07/06/2023,5.32,5.47,5.46,5.52,5.54,5.44,4.99,4.68,4.37,4.22,4.05,4.23,4.01
07/05/2023,5.28,5.38,5.44,5.51,5.52,5.40,4.94,4.59,4.25,4.11,3.95,4.17,3.95
07/03/2023,5.27,5.40,5.44,5.52,5.53,5.43,4.94,4.56,4.19,4.03,3.86,4.08,3.87
06/30/2023,5.24,5.39,5.43,5.50,5.47,5.40,4.87,4.49,4.13,3.97,3.81,4.06,3.85
06/29/2023,5.25,5.40,5.46,5.51,5.50,5.41,4.87,4.49,4.14,3.99,3.85,4.11,3.92
06/28/2023,5.17,5.32,5.44,5.49,5.47,5.32,4.71,4.32,3.97,3.83,3.71,4.00,3.81
06/27/2023,5.17,5.31,5.44,5.44,5.46,5.33,4.74,4.38,4.02,3.90,3.77,4.03,3.84
06/26/2023,5.17,5.31,5.50,5.44,5.45,5.27,4.65,4.30,3.96,3.85,3.72,4.01,3.83"""

OLD_CSV_DATA = """Date,"3 Mo","6 Mo","1 Yr","2 Yr","3 Yr","5 Yr","7 Yr","10 Yr","20 Yr","30 Yr"
12/29/2000,5.89,5.70,5.32,5.11,5.06,4.99,5.16,5.12,5.59,5.46
12/28/2000,5.87,5.79,5.40,5.18,5.12,5.02,5.21,5.13,5.59,5.44
12/27/2000,5.75,5.68,5.32,5.10,5.04,4.99,5.17,5.11,5.58,5.45
12/26/2000,5.85,5.76,5.31,5.10,5.00,4.92,5.09,5.04,5.54,5.41
12/22/2000,5.27,5.52,5.25,5.10,5.02,4.93,5.07,5.02,5.52,5.40
12/21/2000,5.38,5.64,5.33,5.14,5.04,4.94,5.10,5.03,5.53,5.41
12/20/2000,5.82,5.82,5.46,5.24,5.12,5.00,5.13,5.08,5.55,5.42
12/19/2000,5.93,5.93,5.58,5.35,5.23,5.12,5.22,5.19,5.61,5.47
12/18/2000,5.95,5.94,5.58,5.33,5.21,5.10,5.19,5.17,5.59,5.44
12/15/2000,6.02,5.99,5.65,5.38,5.26,5.15,5.24,5.20,5.59,5.44
12/14/2000,6.06,6.01,5.70,5.43,5.31,5.19,5.28,5.23,5.60,5.45
12/13/2000,6.06,6.03,5.74,5.45,5.34,5.24,5.33,5.29,5.64,5.48
12/12/2000,6.06,6.06,5.79,5.54,5.42,5.33,5.42,5.36,5.70,5.53
12/11/2000,6.08,6.06,5.79,5.52,5.43,5.33,5.42,5.37,5.71,5.54
12/08/2000,6.09,6.04,5.77,5.50,5.41,5.32,5.39,5.35,5.71,5.55"""


@pytest.fixture
def new_csv_data():
    return NEW_CSV_DATA


@pytest.fixture
def old_csv_data():
    return OLD_CSV_DATA
