def load_rows(path):
    with open(path) as handle:
        return [parse_row(line) for line in handle]


def parse_row(line):
    fields = line.strip().split(",")
    return normalize_fields(fields)


def normalize_fields(fields):
    return [field.lower() for field in fields]


def run(path):
    rows = load_rows(path)
    report(rows)
    return rows


def report(rows):
    print(len(rows))
    run(rows[0])
