from typing import Dict

from .models import CUSTOMER, INCOMPLETE, OPERATIONS, OTHER_INQUIRY, SPAM, SYSTEM, Call, Entities

# Placeholders: {name} {where} {address} {amount} {duration} {minutes}
SUMMARY_TEMPLATES: Dict[str, str] = {
    # incomplete
    "too_short": "Call ended after {duration}s before anything useful was said.",
    "missed_call": "Missed call{where}; nobody answered and no voicemail was left.",
    "no_recording": "No recording available for this {duration}s call.",
    "transcription_failed": "{duration}s call{where} produced no usable transcript.",
    "brief_exchange": "Only greetings were exchanged before the call ended.",
    "wrong_number": "Caller{where} dialled the wrong number.",
    "unclassified": "{duration}s call could not be classified; needs manual review.",
    "classification_error": "Call could not be processed; see logs.",
    # spam
    "robocall": "Automated robocall with a press-a-key prompt.",
    "google_listing": "Robocall about the Google Business listing.",
    "b2b_lending": "Business lending/funding sales pitch.",
    "quickbooks_scam": "Suspicious QuickBooks renewal/charge call.",
    "b2b_sales": "Vendor sales pitch to the business.",
    "merchant_services": "Payment/merchant services sales pitch.",
    "yelp_sales": "Yelp advertising sales call.",
    "seo_sales": "SEO / lead generation sales pitch.",
    "workshop_sales": "Invitation to a paid business workshop.",
    "staffing_sales": "Staffing agency sales call.",
    "telemarketing": "Consumer telemarketing call.",
    "media_pitch": "Paid media feature pitch.",
    "newsletter_sales": "Newsletter advertising pitch.",
    "cold_call": "Cold call asking for the business owner.",
    # operations
    "vendor_purchase": "Supplier purchase{amount}{address}.",
    "vendor_order": "Supplier calling that an order is ready.",
    "vendor_logistics": "Delivery logistics with a supplier.",
    "vendor_service": "Call with a service vendor{amount}.",
    "permit_inspection": "Permit / inspection coordination{address}.",
    "subcontractor_payment": "Subcontractor payment discussion{amount}.",
    "internal_accounting": "Bookkeeping / invoice call{amount}.",
    "internal_payment": "Internal payment handling{amount}.",
    "utility_coordination": "Utility company coordination{address}.",
    "crew_coordination": "Crew coordination call{address}.",
    "internal_coordination": "Internal team coordination.",
    # other inquiries
    "job_seeker": "{name} asking about job openings.",
    "out_of_area": "{name}{where} is outside the service area.",
    "vendor_seeking_work": "Vendor or contractor offering services.",
    "sign_inquiry": "Caller asking about a job-site sign.",
    "research_request": "Student or researcher asking for information.",
    "general_question": "General question, not a project lead.",
    # system
    "ivr_hold": "Caller reached the hold message only.",
    "voicemail_greeting": "Only the voicemail greeting was recorded.",
    "test_call": "Internal test call.",
    "platform_notice": "Phone platform service notice.",
    # customer
    "bathroom_remodel": "{name}{where} wants a bathroom remodel{address}.",
    "kitchen_remodel": "{name}{where} wants a kitchen remodel{address}.",
    "adu_inquiry": "{name}{where} asking about an ADU{address}.",
    "foundation_inquiry": "{name}{where} needs foundation work{address}.",
    "concrete_inquiry": "{name}{where} needs concrete work{address}.",
    "drainage_inquiry": "{name}{where} has a drainage problem{address}.",
    "waterproofing_inquiry": "{name}{where} has water coming in{address}.",
    "retaining_wall": "{name}{where} needs a retaining wall{address}.",
    "roof_inquiry": "{name}{where} needs roof repair{address}.",
    "exterior_inquiry": "{name}{where} asking about windows/doors/siding{address}.",
    "fire_damage": "{name}{where} needs fire damage repair{address}.",
    "accessibility_inquiry": "{name}{where} wants grab bars installed{address}.",
    "inspection_inquiry": "{name}{where} needs a balcony inspection/repair{address}.",
    "houzz_lead": "Lead from Houzz: {name}{where}.",
    "estimate_request": "{name}{where} requesting an estimate{address}.",
    "scheduling": "{name} scheduling an appointment{address}.",
    "followup": "{name} following up on an existing project.",
    "voicemail_inquiry": "{name} left a message asking for a call back.",
    "general_inquiry": "{name}{where} asking about services ({minutes} min call).",
}

CATEGORY_DEFAULTS: Dict[str, str] = {
    CUSTOMER: "{name}{where} asking about services.",
    SPAM: "Unsolicited sales or spam call.",
    OPERATIONS: "Internal operations call{amount}.",
    OTHER_INQUIRY: "Non-customer inquiry{where}.",
    SYSTEM: "Phone system call, no caller.",
    INCOMPLETE: "{duration}s call with no usable content.",
}

class _Blank(dict):
    def __missing__(self, key):
        return ""

def render_summary(category: str, sub_category: str, call: Call, entities: Entities) -> str:
    template = SUMMARY_TEMPLATES.get(sub_category) or CATEGORY_DEFAULTS.get(category, "{duration}s call.")
    ctx = _Blank(
        name=entities.name or ("Customer" if category == CUSTOMER else "Caller"),
        where=f" in {call.city}" if call.city else "",
        address=f" at {entities.address}" if entities.address else "",
        amount=f" ({entities.amount})" if entities.amount else "",
        duration=call.duration,
        minutes=round(call.duration / 60, 1),
    )
    return template.format_map(ctx)
