"""
International ACH Transaction (IAT) layouts.

IAT batches replace the domestic Batch Header and Entry Detail layouts and
carry seven mandatory addenda records (types 10 to 16) after every entry.
"""

IAT_SEC_CODE = "IAT"
IAT_MANDATORY_ADDENDA = 7

LAYOUT_IAT_BATCH_HEADER = [
    {"start": 0, "end": 1, "name": "Record Type Code", "description": "5 - Batch Header Record (IAT)"},
    {"start": 1, "end": 4, "name": "Service Class Code", "description": "200=Mixed, 220=Credits, 225=Debits"},
    {"start": 4, "end": 20, "name": "IAT Indicator", "description": "Must read IAT"},
    {"start": 20, "end": 22, "name": "Foreign Exchange Indicator", "description": "FV=Fixed to variable, VF=Variable to fixed, FF=Fixed to fixed"},
    {"start": 22, "end": 23, "name": "Foreign Exchange Reference Indicator", "description": "1=Rate, 2=Reference number, 3=Space filled"},
    {"start": 23, "end": 38, "name": "Foreign Exchange Reference", "description": "Exchange rate or reference number"},
    {"start": 38, "end": 40, "name": "ISO Destination Country Code", "description": "2 letter ISO country code of the receiver"},
    {"start": 40, "end": 50, "name": "Originator Identification", "description": "Tax ID or other identifier of the originator"},
    {"start": 50, "end": 53, "name": "Standard Entry Class", "description": "IAT"},
    {"start": 53, "end": 63, "name": "Company Entry Description", "description": "Description of entries (e.g., PAYROLL)"},
    {"start": 63, "end": 66, "name": "ISO Originating Currency Code", "description": "3 letter ISO currency code (e.g., USD)"},
    {"start": 66, "end": 69, "name": "ISO Destination Currency Code", "description": "3 letter ISO currency code (e.g., MXN)"},
    {"start": 69, "end": 75, "name": "Effective Entry Date", "description": "YYMMDD - Date transactions should post"},
    {"start": 75, "end": 78, "name": "Settlement Date (Julian)", "description": "Reserved/blank or Julian date"},
    {"start": 78, "end": 79, "name": "Originator Status Code", "description": "Always 1"},
    {"start": 79, "end": 87, "name": "Originating DFI Identification", "description": "First 8 digits of the gateway routing number"},
    {"start": 87, "end": 94, "name": "Batch Number", "description": "Sequential batch number within file"},
]

LAYOUT_IAT_ENTRY_DETAIL = [
    {"start": 0, "end": 1, "name": "Record Type Code", "description": "6 - Entry Detail Record (IAT)"},
    {"start": 1, "end": 3, "name": "Transaction Code", "description": "22=Chk Credit, 27=Chk Debit, 32=Sav Credit, 37=Sav Debit"},
    {"start": 3, "end": 11, "name": "Gateway Operator / RDFI Identification", "description": "First 8 digits of receiving routing number"},
    {"start": 11, "end": 12, "name": "Check Digit", "description": "9th digit of routing number (checksum)"},
    {"start": 12, "end": 16, "name": "Number of Addenda Records", "description": "Addenda count for this entry (minimum 0007)"},
    {"start": 16, "end": 29, "name": "Reserved", "description": "Blank/spaces"},
    {"start": 29, "end": 39, "name": "Amount", "description": "Transaction amount in cents (10 digits, zero-filled)"},
    {"start": 39, "end": 74, "name": "Foreign Receiver's Account Number", "description": "Receiver account number (left-justified)"},
    {"start": 74, "end": 76, "name": "Reserved", "description": "Blank/spaces"},
    {"start": 76, "end": 77, "name": "Gateway Operator OFAC Screening Indicator", "description": "Blank or 1 when screened"},
    {"start": 77, "end": 78, "name": "Secondary OFAC Screening Indicator", "description": "Blank or 1 when screened"},
    {"start": 78, "end": 79, "name": "Addenda Record Indicator", "description": "Always 1 for IAT"},
    {"start": 79, "end": 94, "name": "Trace Number", "description": "Unique transaction identifier (ODFI + sequence)"},
]

_ENTRY_SEQUENCE = {
    "start": 87,
    "end": 94,
    "name": "Entry Detail Sequence Number",
    "description": "Last 7 digits of the entry trace number",
}

_RECORD_TYPE = {"start": 0, "end": 1, "name": "Record Type Code", "description": "7 - Addenda Record (IAT)"}


def _addenda_type(code, description):
    return {"start": 1, "end": 3, "name": "Addenda Type Code", "description": f"{code} - {description}"}


LAYOUTS_IAT_ADDENDA = {
    "10": [
        _RECORD_TYPE,
        _addenda_type("10", "Transaction Information"),
        {"start": 3, "end": 6, "name": "Transaction Type Code", "description": "ANN, BUS, DEP, LOA, MIS, MOR, PEN, RLS, SAL, TAX, ..."},
        {"start": 6, "end": 24, "name": "Foreign Payment Amount", "description": "Amount in cents (18 digits, zero-filled)"},
        {"start": 24, "end": 46, "name": "Foreign Trace Number", "description": "Optional trace number from the foreign system"},
        {"start": 46, "end": 81, "name": "Receiving Company / Individual Name", "description": "Name of the receiver"},
        {"start": 81, "end": 87, "name": "Reserved", "description": "Blank/spaces"},
        _ENTRY_SEQUENCE,
    ],
    "11": [
        _RECORD_TYPE,
        _addenda_type("11", "Originator Name and Street Address"),
        {"start": 3, "end": 38, "name": "Originator Name", "description": "Name of the originator"},
        {"start": 38, "end": 73, "name": "Originator Street Address", "description": "Street address of the originator"},
        {"start": 73, "end": 87, "name": "Reserved", "description": "Blank/spaces"},
        _ENTRY_SEQUENCE,
    ],
    "12": [
        _RECORD_TYPE,
        _addenda_type("12", "Originator City, State and Country"),
        {"start": 3, "end": 38, "name": "Originator City & State/Province", "description": "Data elements separated by '*', ending with '\\'"},
        {"start": 38, "end": 73, "name": "Originator Country & Postal Code", "description": "Data elements separated by '*', ending with '\\'"},
        {"start": 73, "end": 87, "name": "Reserved", "description": "Blank/spaces"},
        _ENTRY_SEQUENCE,
    ],
    "13": [
        _RECORD_TYPE,
        _addenda_type("13", "Originating DFI"),
        {"start": 3, "end": 38, "name": "Originating DFI Name", "description": "Name of the originating bank"},
        {"start": 38, "end": 40, "name": "Originating DFI Identification Number Qualifier", "description": "01=National Clearing System, 02=BIC, 03=IBAN"},
        {"start": 40, "end": 74, "name": "Originating DFI Identification", "description": "Bank identifier per the qualifier"},
        {"start": 74, "end": 77, "name": "Originating DFI Branch Country Code", "description": "ISO country code of the originating bank branch"},
        {"start": 77, "end": 87, "name": "Reserved", "description": "Blank/spaces"},
        _ENTRY_SEQUENCE,
    ],
    "14": [
        _RECORD_TYPE,
        _addenda_type("14", "Receiving DFI"),
        {"start": 3, "end": 38, "name": "Receiving DFI Name", "description": "Name of the receiving bank"},
        {"start": 38, "end": 40, "name": "Receiving DFI Identification Number Qualifier", "description": "01=National Clearing System, 02=BIC, 03=IBAN"},
        {"start": 40, "end": 74, "name": "Receiving DFI Identification", "description": "Bank identifier per the qualifier"},
        {"start": 74, "end": 77, "name": "Receiving DFI Branch Country Code", "description": "ISO country code of the receiving bank branch"},
        {"start": 77, "end": 87, "name": "Reserved", "description": "Blank/spaces"},
        _ENTRY_SEQUENCE,
    ],
    "15": [
        _RECORD_TYPE,
        _addenda_type("15", "Receiver Identification and Street Address"),
        {"start": 3, "end": 18, "name": "Receiver Identification Number", "description": "Optional identifier of the receiver"},
        {"start": 18, "end": 53, "name": "Receiver Street Address", "description": "Street address of the receiver"},
        {"start": 53, "end": 87, "name": "Reserved", "description": "Blank/spaces"},
        _ENTRY_SEQUENCE,
    ],
    "16": [
        _RECORD_TYPE,
        _addenda_type("16", "Receiver City, State and Country"),
        {"start": 3, "end": 38, "name": "Receiver City & State/Province", "description": "Data elements separated by '*', ending with '\\'"},
        {"start": 38, "end": 73, "name": "Receiver Country & Postal Code", "description": "Data elements separated by '*', ending with '\\'"},
        {"start": 73, "end": 87, "name": "Reserved", "description": "Blank/spaces"},
        _ENTRY_SEQUENCE,
    ],
}

LAYOUTS_IAT = {
    "5": LAYOUT_IAT_BATCH_HEADER,
    "6": LAYOUT_IAT_ENTRY_DETAIL,
}
