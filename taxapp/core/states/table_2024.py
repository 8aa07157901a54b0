from __future__ import annotations

from taxapp.core.brackets import brackets_from_rows as rows
from taxapp.core.states.info import StateTaxInfo, flat_tax, no_tax, progressive_tax

# ----------------------------- no income tax -----------------------------
_NONE = (
    no_tax("Alaska", "AK"),
    no_tax("Florida", "FL"),
    no_tax("Nevada", "NV"),
    no_tax("New Hampshire", "NH", "Interest & dividends tax repealed as of 2025"),
    no_tax("South Dakota", "SD"),
    no_tax("Tennessee", "TN"),
    no_tax("Texas", "TX"),
    no_tax("Washington", "WA", "Working Families Tax Credit"),
    no_tax("Wyoming", "WY"),
)

# -------------------------------- flat rate -------------------------------
_FLAT = (
    flat_tax("Arizona", "AZ", "0.025", "14600", "Family tax credit", "School tax credit"),
    flat_tax("Colorado", "CO", "0.044", "14600", "Earned income tax credit (25% of federal)", "Child tax credit"),
    flat_tax("Georgia", "GA", "0.0549", "12000", "Low-income credit"),
    flat_tax("Idaho", "ID", "0.058", "14600", "Grocery credit"),
    flat_tax("Illinois", "IL", "0.0495", "0", "Earned income credit (20% of federal)", "Property tax credit"),
    flat_tax("Indiana", "IN", "0.0305", "0", "Unified tax credit", "County taxes may apply"),
    flat_tax("Kentucky", "KY", "0.04", "3160", "Family size tax credit"),
    flat_tax("Michigan", "MI", "0.0425", "0", "Home heating credit", "Earned income credit (30% of federal)"),
    flat_tax("Mississippi", "MS", "0.05", "2300", "First $10,000 exempt"),
    flat_tax("North Carolina", "NC", "0.045", "12750", "Child deduction"),
    flat_tax("Pennsylvania", "PA", "0.0307", "0", "Tax forgiveness credit", "Local taxes may apply"),
    flat_tax("Utah", "UT", "0.0465", "0", "Taxpayer tax credit (effectively reduces rate)", "At-home parent credit"),
)

# ------------------------------- progressive ------------------------------
_PROGRESSIVE = (
    progressive_tax(
        "Alabama", "AL", "2500",
        rows([("0", "500", "0.02"), ("500", "3000", "0.04"), ("3000", None, "0.05")]),
        "Federal tax deduction allowed",
    ),
    progressive_tax(
        "Arkansas", "AR", "2270",
        rows([("0", "4300", "0.02"), ("4300", "8500", "0.04"), ("8500", None, "0.044")]),
    ),
    progressive_tax(
        "California", "CA", "5540",
        rows([
            ("0", "10412", "0.01"),
            ("10412", "24684", "0.02"),
            ("24684", "38959", "0.04"),
            ("38959", "54081", "0.06"),
            ("54081", "68350", "0.08"),
            ("68350", "349137", "0.093"),
            ("349137", "418961", "0.103"),
            ("418961", "698271", "0.113"),
            ("698271", None, "0.123"),
        ]),
        "Renter's credit", "Earned income tax credit",
    ),
    progressive_tax(
        "Connecticut", "CT", "0",
        rows([
            ("0", "10000", "0.03"),
            ("10000", "50000", "0.05"),
            ("50000", "100000", "0.055"),
            ("100000", "200000", "0.06"),
            ("200000", "250000", "0.065"),
            ("250000", None, "0.069"),
        ]),
        "Personal tax credit",
    ),
    progressive_tax(
        "Delaware", "DE", "3250",
        rows([
            ("0", "2000", "0.0"),
            ("2000", "5000", "0.022"),
            ("5000", "10000", "0.039"),
            ("10000", "20000", "0.048"),
            ("20000", "25000", "0.052"),
            ("25000", "60000", "0.055"),
            ("60000", None, "0.066"),
        ]),
        "Earned income credit",
    ),
    progressive_tax(
        "District of Columbia", "DC", "14600",
        rows([
            ("0", "10000", "0.04"),
            ("10000", "40000", "0.06"),
            ("40000", "60000", "0.065"),
            ("60000", "250000", "0.085"),
            ("250000", "500000", "0.0925"),
            ("500000", None, "0.1075"),
        ]),
        "Earned income credit (70% of federal)",
    ),
    progressive_tax(
        "Hawaii", "HI", "2200",
        rows([
            ("0", "2400", "0.014"),
            ("2400", "4800", "0.032"),
            ("4800", "9600", "0.055"),
            ("9600", "14400", "0.064"),
            ("14400", "19200", "0.068"),
            ("19200", "24000", "0.072"),
            ("24000", "36000", "0.076"),
            ("36000", "48000", "0.079"),
            ("48000", "150000", "0.0825"),
            ("150000", "175000", "0.09"),
            ("175000", "200000", "0.10"),
            ("200000", None, "0.11"),
        ]),
        "Low-income household renters credit",
    ),
    progressive_tax(
        "Iowa", "IA", "2210",
        rows([("0", "6210", "0.044"), ("6210", "31050", "0.0482"), ("31050", None, "0.057")]),
    ),
    progressive_tax(
        "Kansas", "KS", "3500",
        rows([("0", "15000", "0.031"), ("15000", "30000", "0.0525"), ("30000", None, "0.057")]),
        "Earned income credit (17% of federal)", "Food sales tax credit",
    ),
    progressive_tax(
        "Louisiana", "LA", "4500",
        rows([("0", "12500", "0.0185"), ("12500", "50000", "0.035"), ("50000", None, "0.0425")]),
        "Earned income credit",
    ),
    progressive_tax(
        "Maine", "ME", "14600",
        rows([("0", "24500", "0.058"), ("24500", "58050", "0.0675"), ("58050", None, "0.0715")]),
        "Property tax fairness credit",
    ),
    progressive_tax(
        "Maryland", "MD", "2550",
        rows([
            ("0", "1000", "0.02"),
            ("1000", "2000", "0.03"),
            ("2000", "3000", "0.04"),
            ("3000", "100000", "0.0475"),
            ("100000", "125000", "0.05"),
            ("125000", "150000", "0.0525"),
            ("150000", "250000", "0.055"),
            ("250000", None, "0.0575"),
        ]),
        "Earned income credit (45% of federal)", "Local piggyback taxes apply",
    ),
    progressive_tax(
        "Massachusetts", "MA", "0",
        rows([("0", "1000000", "0.05"), ("1000000", None, "0.09")]),
        "No-tax status for low incomes", "Millionaire's surtax above $1M",
    ),
    progressive_tax(
        "Minnesota", "MN", "14575",
        rows([
            ("0", "30070", "0.0535"),
            ("30070", "98760", "0.068"),
            ("98760", "183340", "0.0785"),
            ("183340", None, "0.0985"),
        ]),
        "Working family credit", "K-12 education credit",
    ),
    progressive_tax(
        "Missouri", "MO", "14600",
        rows([
            ("0", "1207", "0.02"),
            ("1207", "2414", "0.025"),
            ("2414", "3621", "0.03"),
            ("3621", "4828", "0.035"),
            ("4828", "6035", "0.04"),
            ("6035", "7242", "0.045"),
            ("7242", "8449", "0.05"),
            ("8449", None, "0.048"),
        ]),
    ),
    progressive_tax(
        "Montana", "MT", "14600",
        rows([("0", "20500", "0.047"), ("20500", None, "0.059")]),
    ),
    progressive_tax(
        "Nebraska", "NE", "7900",
        rows([
            ("0", "3700", "0.0246"),
            ("3700", "22170", "0.0351"),
            ("22170", "35730", "0.0501"),
            ("35730", None, "0.0584"),
        ]),
        "Earned income credit (10% of federal)",
    ),
    progressive_tax(
        "New Jersey", "NJ", "0",
        rows([
            ("0", "20000", "0.014"),
            ("20000", "35000", "0.0175"),
            ("35000", "40000", "0.035"),
            ("40000", "75000", "0.05525"),
            ("75000", "500000", "0.0637"),
            ("500000", "1000000", "0.0897"),
            ("1000000", None, "0.1075"),
        ]),
        "Earned income credit (40% of federal)", "Property tax deduction up to $15,000",
    ),
    progressive_tax(
        "New Mexico", "NM", "14600",
        rows([
            ("0", "5500", "0.017"),
            ("5500", "11000", "0.032"),
            ("11000", "16000", "0.047"),
            ("16000", "210000", "0.049"),
            ("210000", None, "0.059"),
        ]),
        "Low-income comprehensive tax rebate", "Working families tax credit",
    ),
    progressive_tax(
        "New York", "NY", "8000",
        rows([
            ("0", "8500", "0.04"),
            ("8500", "11700", "0.045"),
            ("11700", "13900", "0.0525"),
            ("13900", "80650", "0.055"),
            ("80650", "215400", "0.06"),
            ("215400", "1077550", "0.0685"),
            ("1077550", None, "0.109"),
        ]),
        "Earned income credit (30% of federal)", "NYC residents pay additional city tax",
    ),
    progressive_tax(
        "North Dakota", "ND", "14600",
        rows([("0", "44725", "0.0195"), ("44725", None, "0.025")]),
    ),
    progressive_tax(
        "Ohio", "OH", "0",
        rows([("0", "26050", "0.0"), ("26050", "100000", "0.0275"), ("100000", None, "0.035")]),
        "Personal exemption credit", "Joint filing credit", "Local taxes may apply",
    ),
    progressive_tax(
        "Oklahoma", "OK", "6350",
        rows([
            ("0", "1000", "0.0025"),
            ("1000", "2500", "0.0075"),
            ("2500", "3750", "0.0175"),
            ("3750", "4900", "0.0275"),
            ("4900", "7200", "0.0375"),
            ("7200", None, "0.0475"),
        ]),
        "Earned income credit (5% of federal)",
    ),
    progressive_tax(
        "Oregon", "OR", "2745",
        rows([
            ("0", "4050", "0.0475"),
            ("4050", "10200", "0.0675"),
            ("10200", "125000", "0.0875"),
            ("125000", None, "0.099"),
        ]),
        "Earned income credit (12% of federal)", "No sales tax",
    ),
    progressive_tax(
        "Rhode Island", "RI", "10550",
        rows([("0", "73450", "0.0375"), ("73450", "166950", "0.0475"), ("166950", None, "0.0599")]),
        "Earned income credit (15% of federal)",
    ),
    progressive_tax(
        "South Carolina", "SC", "14600",
        rows([("0", "3460", "0.0"), ("3460", "17330", "0.03"), ("17330", None, "0.064")]),
        "Two-earner credit",
    ),
    progressive_tax(
        "Vermont", "VT", "14600",
        rows([
            ("0", "45400", "0.0335"),
            ("45400", "110050", "0.066"),
            ("110050", "229550", "0.076"),
            ("229550", None, "0.0875"),
        ]),
        "Earned income credit (38% of federal)",
    ),
    progressive_tax(
        "Virginia", "VA", "8000",
        rows([("0", "3000", "0.02"), ("3000", "5000", "0.03"), ("5000", "17000", "0.05"), ("17000", None, "0.0575")]),
        "Low-income tax credit",
    ),
    progressive_tax(
        "West Virginia", "WV", "0",
        rows([
            ("0", "10000", "0.0236"),
            ("10000", "25000", "0.0315"),
            ("25000", "40000", "0.0354"),
            ("40000", "60000", "0.0472"),
            ("60000", None, "0.0512"),
        ]),
    ),
    progressive_tax(
        "Wisconsin", "WI", "12760",
        rows([
            ("0", "14320", "0.035"),
            ("14320", "28640", "0.044"),
            ("28640", "315310", "0.053"),
            ("315310", None, "0.0765"),
        ]),
        "Earned income credit", "Homestead credit",
    ),
)

STATE_TAX_2024: dict[str, StateTaxInfo] = {
    info.abbreviation: info for info in (*_NONE, *_FLAT, *_PROGRESSIVE)
}
