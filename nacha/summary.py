"""Quick summary of a NACHA file (batches, entries and amounts)."""

from .base import BATCH_HEADER, ENTRY_DETAIL, is_digits, parse_amount, split_lines


def summarize(text):
    """
    Lightweight pass over the file, independent of the validation:
    - Batch Header records are counted as batches;
    - Entry Detail records are counted as entries, and the amount
      (positions 30-39) goes to credits when the 2nd digit of the transaction
      code is 0-4, or to debits when it is 5-9.
    Zero or unreadable amounts are ignored. Amounts are returned in dollars.
    """
    batches = 0
    entries = 0
    total_debit_cents = 0
    total_credit_cents = 0

    for line in split_lines(text):
        record_type = line[0:1]
        if record_type == BATCH_HEADER:
            batches += 1
            continue
        if record_type != ENTRY_DETAIL:
            continue

        entries += 1
        if len(line) < 39:
            continue

        transaction_code = line[1:3]
        cents = parse_amount(line[29:39])
        if not cents or not is_digits(transaction_code, 2):
            continue

        if int(transaction_code[1]) <= 4:
            total_credit_cents += cents
        else:
            total_debit_cents += cents

    total_debit = total_debit_cents / 100.0
    total_credit = total_credit_cents / 100.0
    return {
        "batches": batches,
        "entries": entries,
        "total_debit": total_debit,
        "total_credit": total_credit,
        "net_amount": (total_credit_cents - total_debit_cents) / 100.0,
    }
