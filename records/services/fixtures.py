"""
Example records used to seed an empty local store.

The sets are deliberately small and self-consistent: appointments and
reports point at the five fixture patients by name and identifier.
There is no doctor fixture set; the doctors collection starts empty.
"""
from __future__ import annotations

import copy

from records.entities import APPOINTMENTS, DOCTORS, PATIENTS, REPORTS, EntityType

DEFAULT_PATIENTS = [
    {
        'id': 'P001', 'name': 'John Smith', 'age': 45, 'gender': 'Male',
        'phone': '+1 (555) 123-4567', 'email': 'john.smith@email.com',
        'address': '123 Main St, New York, NY 10001', 'status': 'Critical',
        'condition': 'Cardiac Arrest', 'admission_date': '2024-01-10', 'doctor': 'Dr. Johnson',
        'blood_group': 'O+', 'emergency_contact': '+1 (555) 987-6543',
    },
    {
        'id': 'P002', 'name': 'Emily Davis', 'age': 32, 'gender': 'Female',
        'phone': '+1 (555) 234-5678', 'email': 'emily.davis@email.com',
        'address': '456 Oak Ave, Los Angeles, CA 90210', 'status': 'Normal',
        'condition': 'Regular Checkup', 'admission_date': '2024-01-15', 'doctor': 'Dr. Wilson',
        'blood_group': 'A+', 'emergency_contact': '+1 (555) 876-5432',
    },
    {
        'id': 'P003', 'name': 'Michael Brown', 'age': 58, 'gender': 'Male',
        'phone': '+1 (555) 345-6789', 'email': 'michael.brown@email.com',
        'address': '789 Pine St, Chicago, IL 60601', 'status': 'Critical',
        'condition': 'Pneumonia', 'admission_date': '2024-01-12', 'doctor': 'Dr. Johnson',
        'blood_group': 'B+', 'emergency_contact': '+1 (555) 765-4321',
    },
    {
        'id': 'P004', 'name': 'Sarah Wilson', 'age': 28, 'gender': 'Female',
        'phone': '+1 (555) 456-7890', 'email': 'sarah.wilson@email.com',
        'address': '321 Elm St, Houston, TX 77001', 'status': 'Normal',
        'condition': 'Pregnancy Checkup', 'admission_date': '2024-01-14', 'doctor': 'Dr. Martinez',
        'blood_group': 'AB+', 'emergency_contact': '+1 (555) 654-3210',
    },
    {
        'id': 'P005', 'name': 'Robert Taylor', 'age': 67, 'gender': 'Male',
        'phone': '+1 (555) 567-8901', 'email': 'robert.taylor@email.com',
        'address': '654 Maple Ave, Phoenix, AZ 85001', 'status': 'Stable',
        'condition': 'Diabetes Management', 'admission_date': '2024-01-11', 'doctor': 'Dr. Johnson',
        'blood_group': 'O-', 'emergency_contact': '+1 (555) 543-2109',
    },
]

DEFAULT_APPOINTMENTS = [
    {
        'id': 'A001', 'patient_name': 'John Smith', 'patient_id': 'P001', 'doctor': 'Dr. Johnson',
        'appointment_date': '2024-01-16', 'appointment_time': '09:00', 'type': 'Consultation',
        'status': 'Scheduled', 'notes': 'Follow-up for cardiac condition', 'duration': '30 minutes',
    },
    {
        'id': 'A002', 'patient_name': 'Emily Davis', 'patient_id': 'P002', 'doctor': 'Dr. Wilson',
        'appointment_date': '2024-01-16', 'appointment_time': '10:30', 'type': 'Checkup',
        'status': 'Completed', 'notes': 'Regular health checkup', 'duration': '45 minutes',
    },
    {
        'id': 'A003', 'patient_name': 'Michael Brown', 'patient_id': 'P003', 'doctor': 'Dr. Johnson',
        'appointment_date': '2024-01-16', 'appointment_time': '14:00', 'type': 'Treatment',
        'status': 'In Progress', 'notes': 'Pneumonia treatment session', 'duration': '60 minutes',
    },
    {
        'id': 'A004', 'patient_name': 'Sarah Wilson', 'patient_id': 'P004', 'doctor': 'Dr. Martinez',
        'appointment_date': '2024-01-17', 'appointment_time': '11:00', 'type': 'Consultation',
        'status': 'Scheduled', 'notes': 'Pregnancy consultation', 'duration': '30 minutes',
    },
    {
        'id': 'A005', 'patient_name': 'Robert Taylor', 'patient_id': 'P005', 'doctor': 'Dr. Johnson',
        'appointment_date': '2024-01-17', 'appointment_time': '15:30', 'type': 'Follow-up',
        'status': 'Scheduled', 'notes': 'Diabetes management follow-up', 'duration': '30 minutes',
    },
]

DEFAULT_REPORTS = [
    {
        'id': 'R001', 'patient_name': 'John Smith', 'patient_id': 'P001', 'test_type': 'Blood Test',
        'test_date': '2024-01-14', 'report_date': '2024-01-15', 'status': 'Completed',
        'doctor': 'Dr. Johnson', 'technician': 'Tech. Sarah',
        'results': 'Hemoglobin: 12.5 g/dL (Normal), White Blood Cells: 7,200/μL (Normal), Platelets: 250,000/μL (Normal)',
        'notes': 'All values within normal range. Continue current medication.', 'priority': 'Normal',
    },
    {
        'id': 'R002', 'patient_name': 'Emily Davis', 'patient_id': 'P002', 'test_type': 'X-Ray',
        'test_date': '2024-01-15', 'report_date': '2024-01-15', 'status': 'Completed',
        'doctor': 'Dr. Wilson', 'technician': 'Tech. Mike',
        'results': 'Chest X-ray shows clear lungs with no signs of infection or abnormalities.',
        'notes': 'Normal chest X-ray. No follow-up required.', 'priority': 'Normal',
    },
    {
        'id': 'R003', 'patient_name': 'Michael Brown', 'patient_id': 'P003', 'test_type': 'CT Scan',
        'test_date': '2024-01-14', 'report_date': '2024-01-16', 'status': 'In Review',
        'doctor': 'Dr. Johnson', 'technician': 'Tech. Lisa',
        'results': 'CT scan of chest shows signs of pneumonia in lower right lobe.',
        'notes': 'Requires immediate treatment. Patient has been notified.', 'priority': 'Critical',
    },
    {
        'id': 'R004', 'patient_name': 'Sarah Wilson', 'patient_id': 'P004', 'test_type': 'Ultrasound',
        'test_date': '2024-01-15', 'report_date': None, 'status': 'Pending',
        'doctor': 'Dr. Martinez', 'technician': 'Tech. Anna',
        'results': '', 'notes': 'Routine pregnancy ultrasound scheduled.', 'priority': 'Normal',
    },
    {
        'id': 'R005', 'patient_name': 'Robert Taylor', 'patient_id': 'P005', 'test_type': 'Blood Sugar Test',
        'test_date': '2024-01-13', 'report_date': '2024-01-14', 'status': 'Completed',
        'doctor': 'Dr. Johnson', 'technician': 'Tech. Sarah',
        'results': 'Fasting glucose: 145 mg/dL (Elevated), HbA1c: 7.2% (Elevated)',
        'notes': 'Blood sugar levels elevated. Adjust medication dosage.', 'priority': 'Urgent',
    },
]

_FIXTURES = {
    PATIENTS.slug: DEFAULT_PATIENTS,
    DOCTORS.slug: [],
    APPOINTMENTS.slug: DEFAULT_APPOINTMENTS,
    REPORTS.slug: DEFAULT_REPORTS,
}


def default_records(entity_type: EntityType) -> list[dict]:
    """A fresh copy of the fixture set for ``entity_type``."""
    return copy.deepcopy(_FIXTURES[entity_type.slug])
