"""
Static legal copy for the acceptance pages.

Fragments are trusted HTML. ``$client_name``, ``$property_label``, ``$unit_count``,
``$monthly_rate`` and ``$service_summary`` are filled from the ContractQuote
(escaped) when the full agreement is rendered.
"""

COMPANY_NAME = "Doorbin Waste LLC"
COMPANY_LEGAL_NAME = "Doorbin Waste Services LLC"
LOGO_URL = "https://i.ibb.co/7NyScgsQ/doorbin-icon-new.png"

OVERVIEW_TITLE = "Service Acceptance Protocol"
OVERVIEW_SUBTITLE = "Doorbin Waste Professional Management Agreement"

OVERVIEW_PARAGRAPHS = (
    "This Professional Service Agreement governs the door-to-door waste collection and management services "
    "provided by <b>Doorbin Waste LLC</b>. Our specialized Valet Trash solution is meticulously designed to "
    "enhance multi-family residential properties and condominiums through reliable, sustainable, and "
    "professional waste removal protocols.",
    "By proceeding, you acknowledge that our team possesses the technical capacity, industry experience, and "
    "necessary resources to manage on-site waste safely and efficiently. This agreement outlines the mutual "
    "obligations, service schedules, and performance standards required to maintain optimal environmental "
    "conditions for your residents.",
)

TERMS_LINK_PARAGRAPH = (
    "Please review the specific details regarding property units, frequency, and pricing in the full "
    '<a class="accent" href="$terms_url">Terms of Service</a> before final submission.'
)

ACCEPT_TERMS_LABEL = "I have read and agree to the Doorbin Waste Master Service Agreement."
AUTHORIZED_LABEL = "I confirm that I have authority to bind the client to these terms."

AGREEMENT_TITLE = "Master Service Agreement"
AGREEMENT_HEADING = "MASTER SERVICE AGREEMENT FOR DOOR-TO-DOOR WASTE COLLECTION"

AGREEMENT_PREAMBLE = (
    "<b>PARTIES:</b> This Agreement is entered into by and between <b>DOORBIN WASTE LLC</b>, a Florida Limited "
    'Liability Company, hereinafter referred to as the <b>"SERVICE PROVIDER"</b>, and <b>$client_name</b>, '
    'hereinafter referred to as the <b>"CLIENT"</b>, collectively known as the "Parties".',
    "<b>PROPERTY IDENTIFICATION:</b> The services outlined herein shall be exclusively rendered at the "
    'residential property located at <b>$property_label</b>, hereinafter referred to as the "Property".',
)

# (section heading, [(clause label, clause text)])
AGREEMENT_SECTIONS = (
    (
        "I. DECLARATIONS",
        (
            ("1.1 Capacity:", "The SERVICE PROVIDER declares it possesses the specialized technical knowledge, "
             "licensed equipment, and professional personnel required to execute door-to-door waste management "
             "(Valet Trash) in compliance with local health and safety standards."),
            ("1.2 Authority:", "The CLIENT declares that it has the full legal authority to represent the Property "
             "and to enter into this binding agreement for the management of waste services on behalf of its "
             "residents."),
        ),
    ),
    (
        "II. SCOPE OF SERVICES",
        (
            ("2.1 Operations:", "The SERVICE PROVIDER shall provide comprehensive door-to-door waste collection for "
             "<b>$unit_count residential units</b>. The specific operational frequency and additional conditions "
             "are established as follows: <i>$service_summary</i>."),
            ("2.2 Digital Oversight:", "SERVICE PROVIDER will utilize its proprietary Service App to provide the "
             "CLIENT with automated activity logs and digital photographic evidence of service completion."),
        ),
    ),
    (
        "III. TERM AND DURATION",
        (
            ("3.1 Initial Term:", "This Agreement shall commence on the date of electronic acceptance and remain in "
             "full force for an initial period of twelve (12) months. This contract will automatically renew for "
             "successive twelve-month periods unless written notice of non-renewal is provided at least thirty "
             "(30) days prior to the expiration date."),
        ),
    ),
    (
        "IV. FINANCIAL TERMS",
        (
            ("4.1 Monthly Rate:", "The CLIENT agrees to pay a fixed monthly service fee of <b>$monthly_rate</b>. "
             "Invoices will be generated on the first (1st) day of each month for the current month's service."),
            ("4.2 Payments:", "All payments are due within fifteen (15) calendar days from the invoice date. Late "
             "payments may be subject to a monthly interest penalty of <b>5.0%</b> on the outstanding balance."),
        ),
    ),
    (
        "V. INDEMNIFICATION AND LIABILITY",
        (
            ("5.1 Insurance:", "The SERVICE PROVIDER maintains comprehensive general liability insurance, vehicle "
             "insurance, and workers' compensation as required by the State of Florida. The SERVICE PROVIDER shall "
             "not be held liable for damages resulting from preexisting Property conditions or third-party "
             "negligence."),
        ),
    ),
    (
        "VI. CONFIDENTIALITY AND GOVERNING LAW",
        (
            ("6.1 Data Protection:", "Both parties agree to maintain the strict confidentiality of all resident data "
             "and internal property protocols disclosed during the term of this service."),
            ("6.2 Jurisdiction:", "This Agreement shall be governed and construed in accordance with the laws of the "
             "State of Florida. Any legal dispute shall be settled exclusively in the competent courts located "
             "within the State of Florida."),
        ),
    ),
    (
        "VII. TERMINATION AND BREACH OF CONTRACT",
        (
            ("7.1 Early Termination:", "Termination of this Agreement by the CLIENT without cause prior to the "
             "expiration of the initial twelve (12) month term shall incur a mandatory early termination fee equal "
             "to <b>fifty percent (50%)</b> of the current monthly service rate, in addition to any outstanding "
             "balances due."),
            ("7.2 Force Majeure:", "Either party may terminate this Agreement without penalty upon written notice in "
             "the event of Force Majeure or circumstances beyond reasonable control that render the fulfillment of "
             "services impossible."),
            ("7.3 Default and Suspension:", "Proven violations of contractual obligations by either party, or "
             "repetitive failure by the CLIENT to meet financial obligations, may result in the immediate "
             "suspension of services and/or the permanent closure of the contract at the SERVICE PROVIDER's sole "
             "discretion."),
        ),
    ),
)

LEGAL_NOTICE = (
    "<b>LEGAL NOTICE:</b> This digital document constitutes a Master Service Agreement executed via electronic "
    'acceptance. By clicking "ACCEPT &amp; CONTINUE", the CLIENT certifies that they have read, understood, and '
    "voluntarily agreed to be bound by all terms, conditions, and operational standards set forth by Doorbin "
    "Waste LLC."
)

ACCEPTED_TITLE = "Agreement Accepted"
ACCEPTED_MESSAGE = (
    "Thank you for choosing to work with us! Your service acceptance has been recorded successfully. "
    "We look forward to a successful partnership."
)
